import io
import json

import pytest

from storehours.main import main

SCHEDULE = [
    {"day": "segunda-feira", "hours": "08:00-12:00 / 14:00-18:00", "isOpen": True},
    {"day": "sábado", "hours": "09:00-13:00", "isOpen": False},
]


@pytest.fixture(autouse=True)
def no_env_zone(monkeypatch):
    monkeypatch.delenv("STOREHOURS_TZ", raising=False)


@pytest.fixture
def schedule_file(tmp_path):
    path = tmp_path / "loja.json"
    path.write_text(json.dumps({"name": "Loja", "openingHours": SCHEDULE}), encoding="utf-8")
    return str(path)


def test_open_exits_zero(schedule_file, capsys):
    code = main(["storehours", schedule_file, "--at", "2026-10-19 15:00"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "aberta (segunda-feira: 08:00-12:00 / 14:00-18:00)"


def test_lunch_break_exits_one(schedule_file, capsys):
    code = main(["storehours", schedule_file, "--at", "2026-10-19 13:00"])
    assert code == 1
    assert capsys.readouterr().out.startswith("fechada")


def test_closed_day_and_missing_day(schedule_file, capsys):
    assert main(["storehours", schedule_file, "--at", "2026-10-24 10:00"]) == 1
    assert capsys.readouterr().out.strip() == "fechada (sábado: fechado)"
    assert main(["storehours", schedule_file, "--at", "2026-10-18 10:00"]) == 1
    assert capsys.readouterr().out.strip() == "fechada (sem horário para domingo)"


def test_aware_instant_is_shifted_into_zone(schedule_file):
    # 17:30 UTC Monday is 14:30 in São Paulo (UTC-3)
    code = main(["storehours", schedule_file, "--at", "2026-10-19T17:30:00+00:00",
                 "--tz", "America/Sao_Paulo"])
    assert code == 0


def test_zone_from_environment(schedule_file, monkeypatch):
    monkeypatch.setenv("STOREHOURS_TZ", "America/Sao_Paulo")
    # 11:30 UTC Monday is 08:30 in São Paulo
    assert main(["storehours", schedule_file, "--at", "2026-10-19T11:30:00Z"]) == 0
    # 10:30 UTC Monday is 07:30 in São Paulo
    assert main(["storehours", schedule_file, "--at", "2026-10-19T10:30:00Z"]) == 1


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("[]"))
    assert main(["storehours", "--at", "2026-10-18 03:00"]) == 0
    assert capsys.readouterr().out.strip() == "aberta (sem horário configurado)"


@pytest.mark.parametrize("args", [
    ["missing.json"],
    ["{schedule}", "--at", "not a date"],
    ["{schedule}", "--tz", "Nowhere/Atlantis"],
])
def test_input_errors_exit_two(schedule_file, args):
    argv = ["storehours"] + [a.replace("{schedule}", schedule_file) for a in args]
    assert main(argv) == 2


def test_invalid_json_exits_two(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{oops", encoding="utf-8")
    assert main(["storehours", str(path)]) == 2


def test_tty_without_path_exits_two(monkeypatch):
    class _Tty(io.StringIO):
        def isatty(self):
            return True

    monkeypatch.setattr("sys.stdin", _Tty())
    assert main(["storehours"]) == 2
