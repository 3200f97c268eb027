import pytest

from ethrl.framework.resources import Resource, ResourceManager


class Sheet(Resource):
    def __init__(self):
        self.name = None
        self.args = None

    def create(self, name, *args):
        self.name = name
        self.args = args


class Other(Resource):
    def create(self, name, *args):
        self.name = name


class Broken(Resource):
    def create(self, name, *args):
        raise FileNotFoundError(name)


def test_resource_is_abstract():
    with pytest.raises(TypeError):
        Resource()


def test_get_creates_with_name_and_args():
    manager = ResourceManager()
    sheet = manager.get("hero.png", Sheet, "renderer", 3)
    assert sheet.name == "hero.png"
    assert sheet.args == ("renderer", 3)


def test_get_returns_cached_instance():
    manager = ResourceManager()
    first = manager.get("hero.png", Sheet)
    second = manager.get("hero.png", Sheet, "ignored")
    assert second is first
    assert second.args == ()


def test_get_with_wrong_type_returns_none():
    manager = ResourceManager()
    manager.get("hero.png", Sheet)
    assert manager.get("hero.png", Other) is None


def test_shutdown_clears_cache():
    manager = ResourceManager()
    first = manager.get("hero.png", Sheet)
    manager.shutdown()
    assert manager.get("hero.png", Sheet) is not first


def test_failed_create_raises_and_is_not_cached():
    manager = ResourceManager()
    with pytest.raises(FileNotFoundError):
        manager.get("missing.png", Broken)
    sheet = manager.get("missing.png", Sheet)
    assert sheet.name == "missing.png"