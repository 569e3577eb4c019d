import pytest

from lispy.types import (
    Builtin, Environment, Error, ErrorKind, Lambda, QExpr, SExpr, Symbol, copy_value, type_name,
)


@pytest.mark.parametrize(
    "value,text",
    [
        (42, "42"),
        (-7, "-7"),
        (Symbol("head"), "head"),
        (Error(ErrorKind.TYPE_ERROR, "bad"), "Error: bad"),
        (SExpr(), "()"),
        (QExpr(), "{}"),
        (SExpr([1, Symbol("x"), QExpr([2, 3])]), "(1 x {2 3})"),
        (QExpr([SExpr([Symbol("+"), 1]), QExpr()]), "{(+ 1) {}}"),
        (Builtin("+", lambda env, args: 0), "<builtin>"),
        (Lambda(QExpr([Symbol("a")]), SExpr([Symbol("a")])), "(fun {a} (a))"),
    ]
)
def test_printing(value, text):
    assert str(value) == text


@pytest.mark.parametrize(
    "value,name",
    [
        (1, "Number"),
        (Symbol("s"), "Symbol"),
        (Error(ErrorKind.EMPTY_LIST, "e"), "Error"),
        (SExpr(), "S-Expression"),
        (QExpr(), "Q-Expression"),
        (Builtin("list", lambda env, args: 0), "Function"),
        (Lambda(QExpr(), SExpr()), "Function"),
    ]
)
def test_type_names(value, name):
    assert type_name(value) == name


def test_list_variants_are_distinct():
    assert SExpr([1]) != QExpr([1])
    assert QExpr([1, QExpr([2])]) == QExpr([1, QExpr([2])])


def test_copy_is_deep():
    q = QExpr([1, QExpr([2])])
    c = copy_value(q)
    c[1].append(3)
    assert q == QExpr([1, QExpr([2])])


def test_builtin_copy_is_shared():
    b = Builtin("+", lambda env, args: 0)
    assert copy_value(b) is b


def test_lambda_copy_owns_its_parts():
    outer = Environment()
    lam = Lambda(QExpr([Symbol("a"), Symbol("b")]), SExpr([Symbol("a")]), Environment(outer))
    lam.env.define(Symbol("z"), 1)
    c = lam.copy()
    c.formals.pop()
    c.body.append(Symbol("b"))
    c.env.define(Symbol("z"), 2)
    assert str(lam) == "(fun {a b} (a))"
    assert lam.env.lookup(Symbol("z")) == 1
    assert c.env.outer is outer


def test_errors_compare_by_kind_and_message():
    assert Error(ErrorKind.TYPE_ERROR, "m") == Error(ErrorKind.TYPE_ERROR, "m")
    assert Error(ErrorKind.TYPE_ERROR, "m") != Error(ErrorKind.ARITY_MISMATCH, "m")


def test_lambda_equality_is_structural():
    lam = Lambda(QExpr([Symbol("a")]), SExpr([Symbol("+"), Symbol("a"), 1]))
    assert lam == lam.copy()
    assert copy_value(QExpr([lam, 1])) == QExpr([lam, 1])
    assert lam != Lambda(QExpr([Symbol("b")]), SExpr([Symbol("+"), Symbol("b"), 1]))
    assert lam != Builtin("+", lambda env, args: 0)


def test_partial_applications_differ_by_bound_arguments(interp):
    interp.eval("def {add} (fun {x y} {+ x y})")
    assert interp.eval("add 1") == interp.eval("add 1")
    assert interp.eval("add 1") != interp.eval("add 2")
