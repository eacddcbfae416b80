from __future__ import annotations

import runpy

import pytest

from fx_convert import cli


def test_main_module_exits_with_cli_status(monkeypatch) -> None:
    monkeypatch.setattr(cli, "main", lambda: 4)

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("fx_convert", run_name="__main__")

    assert excinfo.value.code == 4
