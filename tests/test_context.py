import pytest

from rum.errors import UnknownVariableError
from rum.reader.source import Source, SourceRef
from rum.types.callables import HostFunction
from rum.types.context import Context
from rum.types.values import Identifier, Integer


def test_define_and_get():
    env = Context()
    assert env.define("a", Integer(1)) == Integer(1)
    assert env.get("a") == Integer(1)
    assert env.get(Identifier("a")) == Integer(1)
    assert "a" in env


def test_lookup_walks_the_parents():
    root = Context()
    root.define("a", Integer(1))
    inner = root.child().child()
    assert inner.get("a") == Integer(1)
    assert inner.find("a") is root
    assert inner.root() is root


def test_shadowing_is_local():
    root = Context()
    root.define("a", Integer(1))
    inner = root.child()
    inner.define("a", Integer(2))
    assert inner.get("a") == Integer(2)
    assert root.get("a") == Integer(1)


def test_redefinition_overwrites():
    env = Context()
    env.define("a", Integer(1))
    env.define("a", Integer(2))
    assert env.get("a") == Integer(2)


def test_unknown_variable_is_located():
    ref = SourceRef(Source("(foo)"), 0, 1)
    with pytest.raises(UnknownVariableError) as excinfo:
        Context().get(Identifier("foo", ref))
    assert excinfo.value.ref == ref
    assert "foo" not in Context()


def test_register_function():
    env = Context()
    host = env.register_function("inc", lambda x: x + 1)
    assert isinstance(host, HostFunction)
    assert env.get("inc") is host
    assert host.name == "inc"


def test_printing():
    root = Context()
    root.define("a", Integer(1))
    inner = root.child()
    assert str(root) == "{a: Integer(1)}"
    assert str(inner) == "{} -> ..."
    assert repr(inner) == "<Context 0 bindings, depth 1>"
