from __future__ import annotations

import io
import logging

import pytest

from flagmoji import country, cultural, subdivision
from flagmoji.cli import run


def _run(*argv):
    out = io.StringIO()
    code = run(list(argv), out=out)
    return code, out.getvalue().splitlines()


def test_resolves_mixed_identifiers():
    code, lines = _run("US", "gb-eng", "pirate")
    assert code == 0
    assert lines == [
        f"{country('US')}\tUS\tcountry",
        f"{subdivision('GB-ENG')}\tgb-eng\tsubdivision",
        f"{cultural('pirate')}\tpirate\tcultural",
    ]


def test_unknown_identifier_sets_exit_status():
    code, lines = _run("US", "nowhere")
    assert code == 1
    assert len(lines) == 1


def test_kind_restricts_lookup():
    code, lines = _run("--kind", "international", "US")
    assert code == 1
    assert lines == []
    code, lines = _run("-k", "international", "un")
    assert code == 0
    assert lines[0].endswith("\tinternational")


def test_scalars_column():
    code, lines = _run("--scalars", "EU")
    assert code == 0
    assert lines[0].split("\t")[-1] == "U+1F1EA U+1F1FA"


def test_list_kind():
    code, lines = _run("--list", "subdivision")
    assert code == 0
    assert lines == ["GB-ENG", "GB-WLS", "GB-SCT"]


def test_list_unknown_kind_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        _run("--list", "planet")
    assert exc.value.code == 2


def test_no_arguments_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        _run()
    assert exc.value.code == 2


def test_default_output_follows_current_stdout(capsys):
    assert run(["--list", "international"]) == 0
    assert capsys.readouterr().out.splitlines() == ["EU", "UN"]


def test_run_leaves_root_logging_alone():
    root = logging.getLogger()
    handlers = list(root.handlers)
    _run("US", "nowhere")
    assert root.handlers == handlers
    assert not getattr(root, "_flagmoji_configured", False)
