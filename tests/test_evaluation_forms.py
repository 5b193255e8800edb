import pytest

from lispi.types import errors
from lispi.types.function import Closure
from lispi.types.nil import Nil
from lispi.types.symbol import Symbol


# ------------------ def ------------------

def test_def_binds_globally_and_returns_nil(interp):
    assert interp.eval("(def x 5)") is Nil
    assert interp.eval("x") == 5


def test_def_evaluates_its_value(interp):
    assert interp.eval("(def x (+ 1 2)) x") == 3


def test_def_redefinition(interp):
    assert interp.eval("(def x 1) (def x 2) x") == 2


def test_def_inside_a_closure_is_global(interp):
    interp.eval("(def setter (fn (v) (def y v)))")
    interp.eval("(setter 9)")
    assert interp.eval("y") == 9


@pytest.mark.parametrize("source", ["(def x)", "(def)", "(def x 1 2)"])
def test_def_arity(interp, source):
    with pytest.raises(errors.LispiArityError):
        interp.eval(source)


@pytest.mark.parametrize("source", ['(def "x" 1)', "(def 1 2)", "(def (x) 1)"])
def test_def_requires_literal_symbol(interp, source):
    with pytest.raises(errors.LispiMalformedForm):
        interp.eval(source)


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if true 1 2)", 1),
        ("(if false 1 2)", 2),
        ("(if nil 1 2)", 2),
        ("(if 0 1 2)", 1),
        ("(if (list) 1 2)", 1),
        ('(if "" 1 2)', 1),
        ("(if + 1 2)", 1),
        ("(if (= 1 1) 1 2)", 1),
        ("(if (= 1 2) 1 2)", 2),
        ("(if true 1)", 1),
        ("(if false 1)", Nil),
    ]
)
def test_if(interp, source, expected):
    assert interp.eval(source) == expected


def test_if_only_evaluates_the_taken_branch(interp):
    assert interp.eval("(if true 1 undefined_branch)") == 1
    assert interp.eval("(if false undefined_branch 2)") == 2


@pytest.mark.parametrize("source", ["(if)", "(if true)", "(if true 1 2 3)"])
def test_if_arity(interp, source):
    with pytest.raises(errors.LispiArityError) as exc_info:
        interp.eval(source)
    assert "2 or 3" in str(exc_info.value)
    assert exc_info.value.actual == len(source.split()) - 1


# ------------------ fn ------------------

def test_fn_creates_a_closure_without_evaluating_the_body(interp):
    f = interp.eval("(fn (a b) (undefined_fn a b))")
    assert isinstance(f, Closure)
    assert f.params == [Symbol("a"), Symbol("b")]


def test_lambda_simple(interp):
    assert interp.eval("((fn (a b) (+ a b)) 2 3)") == 5


def test_zero_argument_closure(interp):
    assert interp.eval("((fn () 42))") == 42


def test_closure_sees_later_global_definitions(interp):
    interp.eval("(def x 1)")
    interp.eval("(def getx (fn () x))")
    assert interp.eval("(getx)") == 1
    interp.eval("(def x 2)")
    assert interp.eval("(getx)") == 2


def test_closure_may_refer_to_a_global_defined_after_it(interp):
    interp.eval("(def call_later (fn () (later 1)))")
    interp.eval("(def later (fn (n) (+ n 1)))")
    assert interp.eval("(call_later)") == 2


def test_lexical_capture(interp):
    interp.eval("(def make_adder (fn (n) (fn (x) (+ x n))))")
    interp.eval("(def add5 (make_adder 5))")
    interp.eval("(def add10 (make_adder 10))")
    assert interp.eval("(add5 1)") == 6
    assert interp.eval("(add10 1)") == 11


def test_captured_locals_shadow_globals(interp):
    interp.eval("(def n 100)")
    interp.eval("(def make (fn (n) (fn () n)))")
    assert interp.eval("((make 1))") == 1


def test_arguments_are_evaluated_in_the_callers_scope(interp):
    interp.eval("(def f (fn (x) x))")
    interp.eval("(def g (fn (x) (f (+ x 1))))")
    assert interp.eval("(g 1) ") == 2


def test_callee_does_not_see_caller_locals(interp):
    interp.eval("(def show (fn () y))")
    interp.eval("(def wrap (fn (y) (show)))")
    with pytest.raises(errors.LispiUnresolvedSymbol):
        interp.eval("(wrap 1)")


def test_non_tail_recursion_by_name(interp):
    interp.eval("(def count (fn (xs) (if (empty? xs) 0 (+ 1 (count (rest xs))))))")
    assert interp.eval("(count (list 1 2 3 4))") == 4


@pytest.mark.parametrize(
    "source,expected,actual",
    [
        ("((fn (a b) a) 1)", 2, 1),
        ("((fn (a) a) 1 2)", 1, 2),
        ("((fn () 1) 1)", 0, 1),
    ]
)
def test_closure_arity(interp, source, expected, actual):
    with pytest.raises(errors.LispiArityError) as exc_info:
        interp.eval(source)
    assert exc_info.value.expected == expected
    assert exc_info.value.actual == actual
    assert f"expected {expected}, got {actual}" in str(exc_info.value)


def test_arity_is_checked_before_arguments_are_evaluated(interp):
    with pytest.raises(errors.LispiArityError):
        interp.eval("((fn (a) a) undefined_one undefined_two)")


@pytest.mark.parametrize("source", ["(fn (1) 1)", '(fn ("a") 1)', "(fn ((a)) 1)", "(fn x x)", "(fn 1 1)"])
def test_fn_malformed(interp, source):
    with pytest.raises(errors.LispiMalformedForm):
        interp.eval(source)


@pytest.mark.parametrize("source", ["(fn)", "(fn (x))", "(fn (x) x x)"])
def test_fn_arity(interp, source):
    with pytest.raises(errors.LispiArityError):
        interp.eval(source)


def test_special_forms_are_ordinary_function_values(interp):
    assert interp.eval("(def my_if if) (my_if false 1 2)") == 2
    assert interp.eval("(def define def) (define z 3) z") == 3
