# tests/emlvalidate/test_cli.py
from __future__ import annotations
import json

import pytest

from emlvalidate.cli import EXIT_IO_ERROR, EXIT_OK, EXIT_REJECTED, buildParser, main


def test_validate_okPrintsSummary(make_mod, capsys) -> None:
    root = make_mod(files={"textures": None}, custom_textures_path="textures")

    code = main(["validate", str(root)])

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert out.strip() == "OK: Test (EM2/WII), tags: texture-mod"


def test_validate_jsonPrintsRecord(make_mod, capsys) -> None:
    root = make_mod(dependencies=["CoreMod"])

    code = main(["validate", str(root), "--json"])

    record = json.loads(capsys.readouterr().out)
    assert code == EXIT_OK
    assert record["game"] == "EM2"
    assert record["dependencies"] == ["CoreMod"]
    assert record["auto_generated_tags"] == []
    assert "custom_textures_path" not in record


def test_validate_rejectedModExitsOne(make_mod, capsys) -> None:
    root = make_mod(files={"payload.exe": "MZ"})

    code = main(["validate", str(root)])

    captured = capsys.readouterr()
    assert code == EXIT_REJECTED
    assert captured.out == ""
    assert captured.err.startswith("Error: mod contains illegal file (exe)")


def test_validate_missingManifestExitsOne(tmp_path, capsys) -> None:
    assert main(["validate", str(tmp_path)]) == EXIT_REJECTED
    assert "does not exist" in capsys.readouterr().err


def test_missingConfigFileExitsTwo(make_mod, tmp_path, capsys) -> None:
    root = make_mod()

    code = main(["--config", str(tmp_path / "nope.json5"), "validate", str(root)])

    assert code == EXIT_IO_ERROR
    assert capsys.readouterr().err.startswith("Error:")


def test_malformedRuleTablesExitTwo(make_mod, tmp_path, capsys) -> None:
    root = make_mod()
    cfg = tmp_path / "bad.json5"
    cfg.write_text("{ rules: { games: [] } }", encoding="utf-8")

    assert main(["--config", str(cfg), "validate", str(root)]) == EXIT_IO_ERROR


def test_configFileChangesRules(make_mod, tmp_path, capsys) -> None:
    root = make_mod(files={"payload.exe": "MZ"})
    cfg = tmp_path / "lenient.json5"
    cfg.write_text("{ rules: { bannedExtensions: ['dll'] } }", encoding="utf-8")

    assert main(["--config", str(cfg), "validate", str(root)]) == EXIT_OK


def test_generate_createsSkeleton(tmp_path, capsys) -> None:
    target = tmp_path / "fresh"

    code = main(["generate", "--game", "emr", "--platform", "pc", str(target)])

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "Generated EMR/PC mod skeleton" in out
    assert "Add icon.png before validating." in out
    assert (target / "mod.json").is_file()
    assert (target / "scripts").is_dir()


def test_generate_forbiddenPairExitsOne(tmp_path, capsys) -> None:
    target = tmp_path / "fresh"

    code = main(["generate", "--game", "EM1", "--platform", "PC", str(target)])

    assert code == EXIT_REJECTED
    assert "impossible combination (EM1/PC)." in capsys.readouterr().err
    assert not target.exists()


def test_logLevelFlag_sendsDebugToStderr(make_mod, capsys) -> None:
    root = make_mod()

    code = main(["--log-level", "DEBUG", "validate", str(root)])

    captured = capsys.readouterr()
    assert code == EXIT_OK
    assert "Running stage 'identity'" in captured.err
    assert captured.out.startswith("OK:")


def test_logJsonFlag_emitsJsonLines(make_mod, capsys) -> None:
    root = make_mod()

    main(["--log-level", "INFO", "--log-json", "validate", str(root)])

    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    assert lines
    assert all(json.loads(line)["logger"].startswith("emlvalidate") for line in lines)


def test_parser_requiresCommand(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        buildParser().parse_args([])
    assert excinfo.value.code == 2


def test_validate_jsonRejectionWritesErrorObject(make_mod, capsys) -> None:
    root = make_mod(dependencies=["core-mod"])

    code = main(["validate", str(root), "--json"])

    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert code == EXIT_REJECTED
    assert payload["error"]["type"] == "InvalidDependencyNameError"
    assert payload["error"]["attrs"] == {"dependency": "core-mod"}
    assert captured.err.startswith("Error:")


def test_validate_jsonUnreadableModWritesErrorObject(make_mod, capsys) -> None:
    # A directory named like the description file cannot be read as text
    root = make_mod(files={"description.md": None})

    code = main(["validate", str(root), "--json"])

    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert code == EXIT_IO_ERROR
    assert payload["error"]["type"] == "PackageIOError"
    assert payload["error"]["attrs"]["path"].endswith("description.md")
    assert captured.err.startswith("Error:")
