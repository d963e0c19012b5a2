import pytest

from officewatch.activity import classify_activity, classify_room, describe_task
from officewatch.core import RoomRule, default_rooms
from officewatch.models import IDLE_ROOM, Activity


ROOMS = default_rooms()


@pytest.mark.parametrize(
    ("path", "room"),
    [
        ("textevidence/src/index.ts", "TEXTEVIDENCE"),
        ("Text-Evidence/README.md", "TEXTEVIDENCE"),
        ("vincit-dashboard/app/page.tsx", "STORMBREAKER"),
        ("LeadStorm/notes.txt", "STORMBREAKER"),
        ("memory/2026-03-10.md", IDLE_ROOM),
        ("", IDLE_ROOM),
    ],
)
def test_classify_room_matches_keywords_case_insensitively(path: str, room: str) -> None:
    assert classify_room(path, ROOMS) == room


def test_classify_room_first_rule_wins_when_both_match() -> None:
    assert classify_room("workspace/textevidence/api.ts", ROOMS) == "TEXTEVIDENCE"


def test_classify_room_rule_order_is_configurable() -> None:
    reversed_rules = list(reversed(ROOMS))
    assert classify_room("workspace/textevidence/api.ts", reversed_rules) == "STORMBREAKER"


def test_classify_room_uses_git_status_hint() -> None:
    status = "On branch main\nmodified: StormBreaker/config.yml"
    assert classify_room("misc/file.bin", ROOMS, git_status=status) == "STORMBREAKER"


def test_classify_room_explicit_hints_replace_room_name() -> None:
    rules = [RoomRule(name="ALPHA", label="Alpha", keywords=["alpha"], hints=["proj-a"])]
    assert classify_room("x", rules, git_status="alpha") == IDLE_ROOM
    assert classify_room("x", rules, git_status="in PROJ-A") == "ALPHA"


def test_classify_room_without_rules_is_idle() -> None:
    assert classify_room("textevidence/a.ts", []) == IDLE_ROOM


@pytest.mark.parametrize(
    ("path", "activity"),
    [
        ("src/app.ts", Activity.CODING),
        ("src/App.TSX", Activity.CODING),
        ("tool.py", Activity.CODING),
        ("notes.md", Activity.WRITING),
        ("TODO.TXT", Activity.WRITING),
        ("package.json", Activity.DATA),
        ("leads.csv", Activity.DATA),
        ("image.png", Activity.WORKING),
        ("Makefile", Activity.WORKING),
        ("", Activity.WORKING),
    ],
)
def test_classify_activity_from_extension(path: str, activity: Activity) -> None:
    assert classify_activity(path) is activity


def test_git_commit_command_beats_extension() -> None:
    assert classify_activity("src/app.ts", 'git commit -m "wip"') is Activity.COMMIT
    assert classify_activity("notes.md", "git commit --amend") is Activity.COMMIT


def test_package_manager_command_beats_extension() -> None:
    assert classify_activity("src/app.ts", "npm run build") is Activity.BUILD
    assert classify_activity("", "yarn install") is Activity.BUILD


def test_extension_beats_api_and_email_commands() -> None:
    assert classify_activity("data.json", "curl https://example.com") is Activity.DATA
    assert classify_activity("draft.md", "email send") is Activity.WRITING


def test_api_and_email_commands_without_extension() -> None:
    assert classify_activity("", "curl -s https://example.com/health") is Activity.API
    assert classify_activity("", "python call_api.py") is Activity.API
    assert classify_activity("", "gog gmail send") is Activity.EMAIL
    assert classify_activity("", "ls -la") is Activity.WORKING


def test_describe_task_uses_room_label() -> None:
    assert describe_task("TEXTEVIDENCE", "index.ts", ROOMS) == "Working on TextEvidence: index.ts"
    assert describe_task("STORMBREAKER", "page.tsx", ROOMS) == "Working on Stormbreaker: page.tsx"
    assert describe_task(IDLE_ROOM, "page.tsx", ROOMS) is None
