import pytest

from gfastkit.autobind import router_auto_bind


class _Router:
    def __init__(self):
        self.calls = []

    def bind_controller(self, ctx, group):
        self.calls.append("main")

    def bind_user_controller(self, ctx, group):
        self.calls.append(("user", ctx, group))

    def bind_admin_controller(self, ctx, group):
        self.calls.append(("admin", ctx, group))

    def bind_helper(self, ctx, group):
        self.calls.append("helper")


def test_binds_matching_methods_in_name_order():
    router = _Router()
    names = router_auto_bind("ctx", router, "grp")
    assert names == ["bind_admin_controller", "bind_user_controller"]
    assert router.calls == [("admin", "ctx", "grp"), ("user", "ctx", "grp")]


def test_no_matching_methods():
    class Empty:
        pass

    assert router_auto_bind(None, Empty(), None) == []


def test_rejects_non_struct_values():
    with pytest.raises(TypeError, match="expect struct"):
        router_auto_bind(None, 5, None)


def test_rejects_class_object():
    with pytest.raises(TypeError):
        router_auto_bind(None, _Router, None)