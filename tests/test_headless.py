import functools
import json

import numpy as np
import pytest

from impulse_sandbox.app import headless
from impulse_sandbox.app.headless import ScriptedTap, format_rows, parse_tap, run_headless
from impulse_sandbox.app.main import main
from impulse_sandbox.core.config import SandboxConfig
from impulse_sandbox.core.errors import ConfigError, TickOverrunError
from impulse_sandbox.core.sim import FixedRateClock


def test_headless_free_fall() -> None:
    result = run_headless(SandboxConfig(), 3)
    assert [snap.tick for snap in result.snapshots] == [1, 2, 3]
    np.testing.assert_allclose(result.trajectory, [[100.0, 200.5], [100.0, 201.5], [100.0, 203.0]], atol=1e-9)


def test_scripted_tap_lands_before_its_tick() -> None:
    result = run_headless(SandboxConfig(), 2, [ScriptedTap(tick=2, x=110.0, y=195.5)])

    first, second = result.snapshots
    assert (first.u_kick, first.v_kick) == (0.0, 0.0)
    assert second.u_kick == pytest.approx(10.0)
    assert second.v_kick == pytest.approx(-5.0)
    assert second.x == pytest.approx(101.0)
    assert second.y == pytest.approx(200.5 + (10.0 - 5.0) * 0.1)


def test_parse_tap() -> None:
    assert parse_tap("3:120.5,80") == ScriptedTap(tick=3, x=120.5, y=80.0)
    for bad in ("3", "x:1,2", "3:1", "0:1,2"):
        with pytest.raises(ConfigError):
            parse_tap(bad)


def test_format_rows() -> None:
    result = run_headless(SandboxConfig(), 1)
    rows = format_rows(result.snapshots)
    assert rows[0].split() == ["tick", "x", "y", "u", "v"]
    assert rows[1].split() == ["1", "100.0000", "200.5000", "0.0000", "5.0000"]


def test_cli_headless_run(capsys) -> None:
    assert main(["--headless", "--ticks", "2"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert lines[-1].split() == ["2", "100.0000", "201.5000", "0.0000", "10.0000"]


def test_cli_reads_config_and_taps(tmp_path, capsys) -> None:
    path = tmp_path / "sandbox.json"
    path.write_text(json.dumps({"gravity": 0.0, "initial_position": [0.0, 0.0]}), encoding="utf-8")

    assert main(["--headless", "--config", str(path), "--ticks", "1", "--tap", "1:10,0"]) == 0

    last = capsys.readouterr().out.strip().splitlines()[-1].split()
    assert last == ["1", "1.0000", "0.0000", "10.0000", "0.0000"]


def test_cli_reports_bad_config(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text('{"interval": 0}', encoding="utf-8")
    assert main(["--headless", "--config", str(path)]) == 1
    assert main(["--headless", "--tap", "nope"]) == 1

    for text in ('{"schema_version": null}', '{"schema_version": "v1"}', '{"schema_version": [1]}'):
        path.write_text(text, encoding="utf-8")
        assert main(["--headless", "--config", str(path)]) == 1

    path.write_bytes(b"\xff")
    assert main(["--headless", "--config", str(path)]) == 1


def test_cli_rejects_unknown_log_level() -> None:
    with pytest.raises(SystemExit) as info:
        main(["--headless", "--log-level", "chatty"])
    assert info.value.code == 2


def test_cli_accepts_lowercase_log_level(capsys) -> None:
    assert main(["--headless", "--ticks", "1", "--log-level", "debug"]) == 0
    assert "200.5000" in capsys.readouterr().out


class _SlowTime:
    """Every reading lands 0.2s after the previous one."""

    def __init__(self) -> None:
        self.now = 0.0

    def time(self) -> float:
        self.now += 0.2
        return self.now


def test_overrun_raise_policy_is_terminal_for_headless_run(monkeypatch) -> None:
    slow = _SlowTime()
    monkeypatch.setattr(headless, "FixedRateClock", functools.partial(FixedRateClock, time_fn=slow.time))

    with pytest.raises(TickOverrunError) as info:
        run_headless(SandboxConfig(), 3, overrun_policy="raise")
    assert info.value.tick == 1


def test_cli_overrun_raise_policy_exits_with_error(monkeypatch) -> None:
    slow = _SlowTime()
    monkeypatch.setattr(headless, "FixedRateClock", functools.partial(FixedRateClock, time_fn=slow.time))

    assert main(["--headless", "--ticks", "3", "--overrun-policy", "raise"]) == 1


def test_cli_overrun_log_policy_keeps_every_tick(monkeypatch, capsys) -> None:
    slow = _SlowTime()
    monkeypatch.setattr(headless, "FixedRateClock", functools.partial(FixedRateClock, time_fn=slow.time))

    assert main(["--headless", "--ticks", "3"]) == 0
    assert len(capsys.readouterr().out.strip().splitlines()) == 4
