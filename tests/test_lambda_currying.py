import pytest

from lispy.types.error import Error, ErrorKind
from lispy.types.function import Lambda


@pytest.fixture
def add_interp(interp):
    interp.eval("def {add} (fun {a b} {+ a b})")
    return interp


def test_full_application(add_interp):
    assert add_interp.eval("add 1 2") == 3
    assert add_interp.eval("(add 10 (add 1 2))") == 13


def test_inline_lambda(interp):
    assert interp.eval("((fun {x} {* x x}) 5)") == 25


def test_curried_application(add_interp):
    assert add_interp.eval("((add 1) 2)") == 3


def test_partial_application_prints_as_function(add_interp):
    result = add_interp.eval("(add 1)")
    assert isinstance(result, Lambda)
    assert str(result) == "(fun {b} (+ a b))"


def test_partial_application_does_not_mutate_original(add_interp):
    add_interp.eval("def {inc} (add 1)")
    assert add_interp.eval("inc 5") == 6
    assert add_interp.eval("inc 10") == 11
    assert add_interp.eval("add 2 3") == 5
    assert str(add_interp.eval("add")) == "(fun {a b} (+ a b))"


def test_bound_arguments_shadow_globals(add_interp):
    add_interp.eval("def {add1} (add 1)")
    add_interp.eval("def {a} 100")
    assert add_interp.eval("add1 2") == 3


def test_currying_one_argument_at_a_time(interp):
    interp.eval("def {sum3} (fun {x y z} {+ x y z})")
    assert interp.eval("(((sum3 1) 2) 3)") == 6
    assert interp.eval("((sum3 1 2) 3)") == 6
    assert str(interp.eval("sum3 1 2")) == "(fun {z} (+ x y z))"


@pytest.mark.parametrize(
    "source,message",
    [
        ("add 1 2 3", "Function passed too many arguments. Got 3, Expected 2."),
        ("((add 1) 2 3)", "Function passed too many arguments. Got 2, Expected 1."),
    ]
)
def test_over_application(add_interp, source, message):
    assert add_interp.eval(source) == Error(ErrorKind.ARITY_MISMATCH, message)


@pytest.mark.parametrize(
    "source,kind,message",
    [
        ("fun {x}", ErrorKind.ARITY_MISMATCH,
         "Function 'fun' passed incorrect number of arguments. Got 1, Expected 2."),
        ("fun 1 {x}", ErrorKind.TYPE_ERROR,
         "Function 'fun' passed incorrect type for argument 0. Got Number, Expected Q-Expression."),
        ("fun {x} 1", ErrorKind.TYPE_ERROR,
         "Function 'fun' passed incorrect type for argument 1. Got Number, Expected Q-Expression."),
        ("fun {x 1} {x}", ErrorKind.TYPE_ERROR,
         "Function 'fun' cannot define non-symbol. Got Number, Expected Symbol."),
    ]
)
def test_fun_errors(interp, source, kind, message):
    result = interp.eval(source)
    assert result.kind is kind
    assert result.message == message


def test_errors_in_body_propagate(interp):
    interp.eval("def {bad} (fun {x} {/ x 0})")
    assert interp.eval("bad 1").kind is ErrorKind.DIVISION_BY_ZERO


def test_body_sees_caller_bindings(interp):
    # The closure frame is parented on the calling environment at call time,
    # so a function built inside another body does not keep that body's names.
    interp.eval("def {mk} (fun {x} {fun {y} {+ x y}})")
    assert interp.eval("((mk 1) 2)") == Error(ErrorKind.UNKNOWN_SYMBOL, "Unbound Symbol 'x'")
    interp.eval("def {x} 10")
    assert interp.eval("((mk 1) 2)") == 12


def test_functions_are_values(add_interp):
    assert str(add_interp.eval("(list add +)")) == "{(fun {a b} (+ a b)) <builtin>}"
    assert add_interp.eval("(eval (list add 4 5))") == 9


def test_higher_order_function(add_interp):
    add_interp.eval("def {twice} (fun {f x} {f (f x)})")
    assert add_interp.eval("twice (add 3) 1") == 7


def test_closure_definition_does_not_alias_its_source(interp):
    interp.eval("def {body} {+ n 1}")
    interp.eval("def {f} (fun {n} body)")
    interp.eval("def {body} {* n 100}")
    assert interp.eval("f 1") == 2
