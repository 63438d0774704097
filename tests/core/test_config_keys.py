import yaml
from pathlib import Path


def test_config_contains_search_keys():
    path = Path(__file__).resolve().parents[2] / "config.yaml"
    data = yaml.safe_load(path.read_text())
    assert data["search"]["frontier"] in ("heap", "scan")
    assert data["search"]["validate_provider"] is False
    assert data["logging"]["global_level"] == "INFO"
