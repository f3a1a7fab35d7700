import json
from pathlib import Path

import pytest

from generic_adapters.common.config import DEFAULT_CONFIG_PATH, load_settings
from generic_adapters.registry import BatchPartialFailure, ConfigManager
from generic_adapters.registry.loader import (
    extract_external_frameworks,
    load_external_frameworks,
    load_registry,
    read_config_file,
)
from generic_adapters.schema.gvk import parse_gvk


def _write(p, text: str) -> None:
    p.write_text(text, encoding="utf-8")


def _keys(mgr: ConfigManager) -> set[str]:
    return {h.key for h in mgr.get_all_adapters()}


def test_yaml_cluster_config_loads(tmp_path):
    p = tmp_path / "config.yaml"
    _write(
        p,
        """
apiVersion: config.kueue.x-k8s.io/v1beta1
kind: Configuration
multiKueue:
  gcInterval: 1m
  externalFrameworks:
    - name: PipelineRun.v1.tekton.dev
    - name: Workflow.v1alpha1.argoproj.io
""".lstrip(),
    )

    mgr = load_registry(p)
    assert _keys(mgr) == {
        "tekton.dev/v1, Kind=PipelineRun",
        "argoproj.io/v1alpha1, Kind=Workflow",
    }


def test_json_standalone_list_loads(tmp_path):
    p = tmp_path / "frameworks.json"
    _write(p, json.dumps({"externalFrameworks": [{"name": "Job.v1.batch"}]}))

    rows = load_external_frameworks(p)
    assert rows == [{"name": "Job.v1.batch"}]


def test_missing_section_and_empty_file_yield_no_entries(tmp_path):
    empty = tmp_path / "empty.yaml"
    _write(empty, "")
    assert read_config_file(empty) == {}
    assert load_external_frameworks(empty) == []

    other = tmp_path / "other.yaml"
    _write(other, "multiKueue:\n  gcInterval: 1m\n")
    assert load_external_frameworks(other) == []


@pytest.mark.parametrize(
    "doc,match",
    [
        ({"multiKueue": {"externalFrameworks": "Job.v1.batch"}}, "externalFrameworks must be a list"),
        ({"multiKueue": ["x"]}, "multiKueue must be a mapping"),
    ],
)
def test_malformed_sections_raise(doc, match):
    with pytest.raises(ValueError, match=match):
        extract_external_frameworks(doc)


def test_non_mapping_document_raises(tmp_path):
    p = tmp_path / "list.yaml"
    _write(p, "- name: Job.v1.batch\n")
    with pytest.raises(ValueError, match="config file must be a mapping"):
        read_config_file(p)


def _write_mixed(tmp_path) -> Path:
    p = tmp_path / "mixed.yaml"
    _write(
        p,
        """
multiKueue:
  externalFrameworks:
    - name: Job.v1.batch
    - name: ""
    - name: Pod
""".lstrip(),
    )
    return p


def test_strict_mode_raises_on_partial_failure(tmp_path, monkeypatch):
    monkeypatch.delenv("EXTERNAL_FRAMEWORKS_STRICT", raising=False)
    p = _write_mixed(tmp_path)
    mgr = ConfigManager()

    with pytest.raises(BatchPartialFailure) as ei:
        load_registry(p, manager=mgr)

    assert ei.value.count == 2
    assert _keys(mgr) == {"batch/v1, Kind=Job"}


def test_lenient_mode_keeps_valid_entries(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("EXTERNAL_FRAMEWORKS_STRICT", "false")
    p = _write_mixed(tmp_path)

    mgr = load_registry(p)
    assert mgr.get_adapter(parse_gvk("Job.v1.batch")) is not None
    assert len(mgr) == 1
    assert any(getattr(r, "event_type", None) == "external_framework.partial_load" for r in caplog.records)


def test_path_defaults_to_env_setting(tmp_path, monkeypatch):
    p = tmp_path / "from_env.yaml"
    _write(p, "externalFrameworks:\n  - name: Job.v1.batch\n")
    monkeypatch.setenv("EXTERNAL_FRAMEWORKS_CONFIG", str(p))

    mgr = load_registry()
    assert _keys(mgr) == {"batch/v1, Kind=Job"}


def test_settings_defaults_and_overrides(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    s = load_settings({})
    assert s.config_path == tmp_path / DEFAULT_CONFIG_PATH
    assert s.strict is True
    assert s.log_level == "INFO"
    assert s.service_name is None
    assert s.env is None

    s = load_settings(
        {
            "EXTERNAL_FRAMEWORKS_CONFIG": "cfg/x.yaml",
            "EXTERNAL_FRAMEWORKS_STRICT": "no",
            "LOG_LEVEL": "debug",
            "SERVICE_NAME": "kueue-manager",
        }
    )
    assert s.config_path == tmp_path / "cfg" / "x.yaml"
    assert s.strict is False
    assert s.log_level == "DEBUG"
    assert s.service_name == "kueue-manager"

    assert load_settings({"LOG_LEVEL": "verbose"}).log_level == "INFO"
    assert load_settings({"LOG_LEVEL": "warn"}).log_level == "WARNING"
    assert load_settings({"LOG_LEVEL": " error "}).log_level == "ERROR"
