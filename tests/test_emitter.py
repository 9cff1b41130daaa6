import pytest

from clusterforge.core.exceptions import EmitError, ManifestIOError
from clusterforge.core.models import ResourceIdentity
from clusterforge.smelter.emitter import FileEmitter


def test_path_is_group_kind_name(tmp_path):
    emitter = FileEmitter("demo", str(tmp_path / "working"))
    identity = ResourceIdentity(kind="Deployment", api_version="apps/v1", name="web")
    assert emitter.target_path(identity) == tmp_path / "working" / "demo" / "Deployment_web.yaml"


def test_ensure_directory_is_idempotent(tmp_path):
    emitter = FileEmitter("demo", str(tmp_path))
    assert emitter.ensure_directory() == tmp_path / "demo"
    assert emitter.ensure_directory() == tmp_path / "demo"
    assert (tmp_path / "demo").is_dir()


def test_last_write_wins(tmp_path):
    emitter = FileEmitter("demo", str(tmp_path))
    identity = ResourceIdentity(kind="ConfigMap", name="cfg")

    emitter.emit(identity, "first: 1\n")
    path = emitter.emit(identity, "second: 2\n")

    assert path.read_text() == "second: 2\n"
    assert sorted(p.name for p in (tmp_path / "demo").iterdir()) == ["ConfigMap_cfg.yaml"]


def test_directory_failure_raises_emit_error(tmp_path):
    blocker = tmp_path / "working"
    blocker.write_text("not a directory")
    emitter = FileEmitter("demo", str(blocker))

    with pytest.raises(EmitError) as excinfo:
        emitter.emit(ResourceIdentity(kind="Pod", name="p"), "kind: Pod\n")
    assert isinstance(excinfo.value, ManifestIOError)
    assert isinstance(excinfo.value, OSError)
