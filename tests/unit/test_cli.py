from appointbot.app_shell.cli import main

UTC_RULES = "appointments:\n  timezone: UTC\n"


def test_greet(capsys):
    assert main(["greet", "Doe, John"]) == 0
    assert capsys.readouterr().out == "Nice to meet you, John Doe\n"


def test_command(capsys):
    assert main(["command", "ChatBot hello"]) == 0
    assert main(["command", "hello chatbot"]) == 0
    assert capsys.readouterr().out == "valid\ninvalid\n"


def test_emoji(capsys):
    assert main(["emoji", "hi emoji3 there"]) == 0
    assert capsys.readouterr().out == "hi  there\n"


def test_phone(capsys):
    assert main(["phone", "659-771-594"]) == 0
    assert capsys.readouterr().out == "Oops, it seems like I can't reach out to 659-771-594\n"


def test_urls(capsys):
    assert main(["urls", "visit example.com or test.org now"]) == 0
    assert capsys.readouterr().out == "example.com\ntest.org\n"


def test_create_with_now(capsys):
    assert main(["create", "1", "--now", "2024-01-01T00:00:00.000Z"]) == 0
    assert capsys.readouterr().out == "2024-01-02T00:00:00.000Z\n"


def test_create_bad_now(capsys):
    assert main(["create", "1", "--now", "yesterday"]) == 1


def test_details(capsys, write_rules):
    path = write_rules(UTC_RULES)
    assert main(["--rules", str(path), "details", "2024-04-01T12:30:00.000Z"]) == 0
    out = capsys.readouterr().out
    assert out == "year: 2024\nmonth: 3\ndate: 1\nhour: 12\nminute: 30\n"


def test_details_invalid():
    assert main(["details", "garbage"]) == 1


def test_update(capsys, write_rules):
    path = write_rules(UTC_RULES)
    args = ["--rules", str(path), "update", "2024-05-10T10:00:00.000Z", "--month", "13"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[:3] == ["year: 2025", "month: 1", "date: 10"]


def test_update_strict(write_rules):
    path = write_rules("appointments:\n  timezone: UTC\n  strict_bounds: true\n")
    args = ["--rules", str(path), "update", "2024-05-10T10:00:00.000Z", "--hour", "24"]
    assert main(args) == 1


def test_between(capsys):
    assert main(["between", "2024-01-01T00:01:00.000Z", "2024-01-01T00:00:00.000Z"]) == 0
    assert capsys.readouterr().out == "60\n"


def test_valid(capsys):
    assert main(["valid", "2024-01-02T00:00:00.000Z", "2024-01-01T00:00:00.000Z"]) == 0
    assert main(["valid", "2024-01-01T00:00:00.000Z", "2024-01-01T00:00:00.000Z"]) == 0
    assert capsys.readouterr().out == "valid\ninvalid\n"


def test_missing_rules_file(tmp_path):
    assert main(["--rules", str(tmp_path / "nope.yaml"), "greet", "Doe, John"]) == 1
