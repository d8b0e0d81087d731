from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "reconcile_images.py"

PAYLOAD = {
    "context": {"requestId": "REQ-9"},
    "propertyContents": [
        {
            "medias": [
                {
                    "mediaId": 3241,
                    "subjectId": 81003,
                    "display": "Restaurant",
                    "aestheticScore": {"score": 0.8},
                    "derivatives": [{"size": 16, "name": "t.jpg"}, {"size": 15, "name": "a.jpg"}],
                }
            ],
            "roomTypeContents": [
                {
                    "roomTypeContentId": 201,
                    "medias": [
                        {
                            "mediaId": 3241,
                            "subjectId": 81003,
                            "display": "Room restaurant view",
                            "derivatives": [{"size": 17, "name": "r.jpg"}],
                        }
                    ],
                }
            ],
        }
    ],
}


def _load_script():
    spec = importlib.util.spec_from_file_location("reconcile_images", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def cli(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    config_path = tmp_path / "categories.toml"
    config_path.write_text("[categories]\nBREAKFAST = [81012, 81003]\nRESTAURANT_IN_HOTEL = [81003, 81004]\n")
    monkeypatch.setenv("AMENITY_IMAGES_CATEGORY_CONFIG_PATH", str(config_path))
    monkeypatch.setenv("AMENITY_IMAGES_IMAGE_BASE_URL", "https://cdn.test/")
    monkeypatch.setenv("AMENITY_IMAGES_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("AMENITY_IMAGES_OUTPUT_DIR", str(tmp_path / "out"))

    module = _load_script()
    logging_calls: list[tuple[str, Path]] = []
    monkeypatch.setattr(module, "configure_logging", lambda level, log_dir: logging_calls.append((level, log_dir)))
    module.logging_calls = logging_calls

    payload_path = tmp_path / "payload.json"
    payload_path.write_text(json.dumps(PAYLOAD))
    module.payload_path = payload_path
    return module


def test_invalid_input_exits_with_classification(cli, capsys):
    status = cli.main(["--payload", str(cli.payload_path), "--category", "CASINO", "--room-id", "abc"])

    assert status == 2
    errors = json.loads(capsys.readouterr().out)["errors"]
    assert [error["kind"] for error in errors] == ["UNSUPPORTED_CATEGORY", "INVALID_ROOM_ID"]
    assert errors[1]["value"] == "abc"


def test_payload_run_prints_reconciled_images(cli, capsys, tmp_path):
    status = cli.main(["--payload", str(cli.payload_path), "--category", "breakfast", "--room-id", "201"])

    assert status == 0
    result = json.loads(capsys.readouterr().out)
    assert result == {
        "BREAKFAST": [
            {
                "url": "https://cdn.test/r.jpg",
                "aesthetic_score": None,
                "amenity_type": "ROOM_UNIT",
                "display_text": "Room restaurant view",
            }
        ]
    }
    assert cli.logging_calls == [("INFO", tmp_path / "logs")]
    assert (tmp_path / "logs").is_dir()


def test_prefill_flag_keeps_empty_requested_categories(cli, capsys):
    status = cli.main(
        ["--payload", str(cli.payload_path), "--category", "POOL", "--category", "BREAKFAST", "--prefill"]
    )

    assert status == 0
    result = json.loads(capsys.readouterr().out)
    assert list(result) == ["POOL", "BREAKFAST"]
    assert result["POOL"] == []
    assert result["BREAKFAST"][0]["url"] == "https://cdn.test/a.jpg"
    assert result["BREAKFAST"][0]["amenity_type"] == "PROPERTY"


def test_output_option_writes_through_json_store(cli, capsys, tmp_path):
    status = cli.main(
        [
            "--payload",
            str(cli.payload_path),
            "--category",
            "RESTAURANT_IN_HOTEL",
            "--output",
            "nested/result.json",
            "--log-level",
            "debug",
        ]
    )

    assert status == 0
    assert capsys.readouterr().out == ""
    data = json.loads((tmp_path / "out" / "result.json").read_text())
    assert data["items"]["RESTAURANT_IN_HOTEL"][0]["url"] == "https://cdn.test/a.jpg"
    assert cli.logging_calls == [("debug", tmp_path / "logs")]
