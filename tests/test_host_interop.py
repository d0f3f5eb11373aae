import math
from fractions import Fraction

import pytest

from rum.errors import ArityMismatchError, PanicError, TypeMismatchError, UnsupportedHostFunction
from rum.types.adapters import check_arity, param_to_float, param_to_int
from rum.types.callables import HostFunction
from rum.types.nil import Nil
from rum.types.values import Float, Identifier, Integer, List, Opaque, String


def test_register_function(interp):
    host = interp.register_function("sin", math.sin)
    assert isinstance(host, HostFunction)
    assert interp.eval("(sin 1.0)") == Float(math.sin(1.0))
    assert interp.eval("(type sin)") == String("host-function")


def test_adapters_convert_parameters(interp):
    interp.register_function("sin", math.sin, check_arity(1), param_to_float(0))
    interp.register_function("double", lambda n: n * 2, check_arity(1), param_to_int(0))
    assert interp.eval("(sin 2)") == Float(math.sin(2.0))
    assert interp.eval("(double 100)") == Integer(200)
    assert interp.eval("(double 2.7)") == Integer(4)


def test_adapters_run_in_order(interp):
    seen = []

    def record(tag):
        def adapter(values):
            seen.append(tag)
            return values
        return adapter

    interp.register_function("f", lambda: None, record("a"), record("b"))
    interp.eval("(f)")
    assert seen == ["a", "b"]


def test_adapter_errors(interp):
    interp.register_function("compare", lambda a, b: (a > b) - (a < b), check_arity(2))
    interp.register_function("sin", math.sin, check_arity(1), param_to_float(0))
    assert interp.eval('(compare "test" "test")') == Integer(0)
    with pytest.raises(ArityMismatchError):
        interp.eval('(compare "a" "b" "c")')
    with pytest.raises(TypeMismatchError):
        interp.eval('(sin "a")')


def test_missing_arguments_are_an_arity_mismatch(interp):
    def two(a, b):
        return a + b

    interp.register_function("two", two)
    assert interp.eval("(two 1 2)") == Integer(3)
    with pytest.raises(ArityMismatchError):
        interp.eval("(two 1)")
    with pytest.raises(ArityMismatchError):
        interp.eval("(two 1 2 3)")


def test_variadic_host_function(interp):
    interp.register_function("count", lambda *args: len(args))
    assert interp.eval("(count)") == Integer(0)
    assert interp.eval("(count 1 2 3)") == Integer(3)


class _NoSignature:
    @property
    def __signature__(self):
        raise ValueError("no signature available")

    def __call__(self, *args):
        return max(args)


def test_callable_without_signature_needs_an_arity_check(interp):
    with pytest.raises(UnsupportedHostFunction):
        interp.register_function("biggest", _NoSignature())
    interp.register_function("biggest", _NoSignature(), check_arity(3))
    assert interp.eval("(biggest 1 5 3)") == Integer(5)
    with pytest.raises(ArityMismatchError):
        interp.eval("(biggest)")


def test_builtin_guarded_by_arity(interp):
    interp.register_function("biggest", max, check_arity(2))
    assert interp.eval("(biggest 1 5)") == Integer(5)
    with pytest.raises(ArityMismatchError):
        interp.eval("(biggest 1)")


def test_zero_return_gives_nil(interp):
    calls = []
    interp.register_function("touch", lambda: calls.append(1))
    assert interp.eval("(touch)") == Nil
    assert calls == [1]


def test_tuple_annotation_is_rejected():
    def pair() -> tuple[int, int]:
        return 1, 2

    with pytest.raises(UnsupportedHostFunction):
        HostFunction("pair", pair)


def test_tuple_result_panics(interp):
    interp.register_function("pair", lambda: (1, 2))
    with pytest.raises(PanicError) as excinfo:
        interp.eval("(pair)")
    assert isinstance(excinfo.value.payload, UnsupportedHostFunction)


def test_host_exceptions_become_panics(interp):
    def boom():
        raise ValueError("bad input")

    interp.register_function("boom", boom)
    with pytest.raises(PanicError) as excinfo:
        interp.eval("(+ 1 (boom))")
    err = excinfo.value
    assert isinstance(err.payload, ValueError)
    assert "ValueError: bad input" in str(err)
    assert "in boom" in err.trace
    assert "# interpreter trace:" in err.describe()


def test_values_are_unwrapped_for_the_host(interp):
    received = []
    interp.register_function("keep", lambda v: received.append(v))
    interp.eval('(keep 1) (keep 2.5) (keep "s") (keep true) (keep nil) (keep (array (1 (2 "x"))))')
    assert received == [1, 2.5, "s", True, None, [1, [2, "x"]]]
    assert isinstance(received[0], int)


def test_identifiers_stay_distinct_from_strings(interp):
    interp.register_function("kind", lambda v: type(v).__name__)
    assert interp.eval("(kind (quote a))") == String("Identifier")
    assert interp.eval('(kind "a")') == String("str")


def test_results_are_wrapped(interp):
    interp.register_function("split", lambda s, sep: s.split(sep))
    result = interp.eval('(split "1,2,3" ",")')
    assert result == List([String("1"), String("2"), String("3")])
    assert interp.eval('(len (split "1,2,3,4,5" ","))') == Integer(5)


def test_opaque_values_round_trip(interp):
    interp.register_function("frac", Fraction)
    interp.register_function("numerator", lambda f: f.numerator)
    frac = interp.eval("(frac 1 2)")
    assert isinstance(frac, Opaque)
    assert frac.value == Fraction(1, 2)
    assert interp.eval("(type (frac 1 2))") == String("opaque:Fraction")
    assert interp.eval("(numerator (frac 3 4))") == Integer(3)


def test_raw_values_when_not_unwrapped(interp):
    interp.register_function("first", lambda lst: lst[0], unwrap=False)
    assert interp.eval("(first (quote (a b)))") == Identifier("a")


def test_registering_a_non_callable_fails(interp):
    with pytest.raises(TypeError):
        interp.register_function("x", 42)


# --- Adapters on their own ---

def test_check_arity():
    assert check_arity(1)([1]) == [1]
    assert check_arity(0)([]) == []
    with pytest.raises(ArityMismatchError):
        check_arity(1)([1, 2])


def test_param_to_float():
    out = param_to_float(1)([1, 2])
    assert out == [1, 2.0]
    assert isinstance(out[1], float)
    assert isinstance(out[0], int)
    with pytest.raises(ArityMismatchError):
        param_to_float(2)([1])
    with pytest.raises(TypeMismatchError):
        param_to_float(0)(["a"])
    with pytest.raises(TypeMismatchError):
        param_to_float(0)([True])


def test_param_to_int():
    assert param_to_int(0)([2.9]) == [2]
    assert param_to_int(0)([-2.9]) == [-2]
    with pytest.raises(TypeMismatchError):
        param_to_int(0)([None])


def test_host_fault_keeps_the_call_stack(interp):
    interp.register_function("boom", lambda: 1 // 0)
    with pytest.raises(PanicError) as excinfo:
        interp.eval("(begin (define f (lambda () (boom))) (+ 1 (f)))")
    err = excinfo.value
    assert [str(frame) for frame in err.stack] == [
        "(boom)",
        "(f)",
        "(+ 1 (f))",
        "(begin (define f (lambda () (boom))) (+ 1 (f)))",
    ]
    report = err.describe()
    assert report.count("# triggered at:") == 1
    assert report.count("# called from:") == 3
    assert "# interpreter trace:" in report
