import pytest
from hypothesis import HealthCheck, given, settings as hsettings, strategies as st

from minilisp import errors
from minilisp.evaluation.evaluator import evaluate, evaluate_all
from minilisp.printer import to_string
from minilisp.types.environment import Environment
from minilisp.types.equality import is_equal
from minilisp.types.nil import Nil, T
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol

# -----------------------------------------------------
# Atoms and quoting
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(3.14, env) == 3.14
    assert evaluate("hello", env) == "hello"
    assert evaluate(T, env) is T
    assert evaluate(Nil, env) is Nil


def test_empty_list_evaluates_to_nil(env):
    assert evaluate([], env) is Nil


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42)
    assert evaluate(Symbol("x"), env) == 42
    with pytest.raises(errors.MiniLispUnboundSymbol):
        evaluate(Symbol("z"), env)


atoms = (
    st.integers(min_value=-(2 ** 31), max_value=2 ** 31 - 1)
    | st.floats(allow_nan=False)
    | st.text()
    | st.sampled_from([T, Nil])
)


@hsettings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(atoms)
def test_non_symbol_atoms_evaluate_to_themselves(value):
    assert is_equal(evaluate(value, Environment()), value)


quoted = st.recursive(
    atoms | st.text(alphabet="abcxyz", min_size=1).map(Symbol),
    lambda children: st.lists(children, max_size=4),
    max_leaves=15,
)


@hsettings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(quoted)
def test_quote_returns_argument_unevaluated(form):
    assert is_equal(evaluate([Symbol("quote"), form], Environment()), form)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(quote (1 2))", [1, 2]),
        ("'(a (b c))", [Symbol("a"), [Symbol("b"), Symbol("c")]]),
        ("'a", Symbol("a")),
        ("''a", Symbol("'a")),
        ("(quote (car '(1)))", [Symbol("car"), [Symbol("quote"), [1]]]),
    ],
)
def test_quote(run, source, expected):
    assert run(source) == expected

# -----------------------------------------------------
# List primitives and predicates
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(null '(1 2))", Nil),
        ("(null nil)", T),
        ("(null ())", T),
        ("(null 0)", Nil),
        ("(car nil)", Nil),
        ("(car ())", Nil),
        ("(car '(5))", 5),
        ("(car (cons 1 2))", 1),
        ("(cdr nil)", Nil),
        ("(cdr ())", Nil),
        ("(cdr '(1 2))", [2]),
        ("(cdr '(1))", []),
        ("(null (cdr '(1)))", T),
        ("(cdr (cons 1 2))", 2),
        ("(cons 1 '(2 3))", [1, 2, 3]),
        ("(cons 1 nil)", [1]),
        ("(cons 1 ())", [1]),
        ("(cons 1 2)", Pair(1, 2)),
        ("(cons 1 (cons 2 3))", Pair(1, Pair(2, 3))),
        ("(atom '(1 2))", Nil),
        ("(atom 100)", T),
        ("(atom 'a)", T),
        ("(atom nil)", T),
        ("(atom ())", T),
        ("(atom (cons 1 2))", Nil),
        ("(listp '(1 2))", T),
        ("(listp 100)", Nil),
        ("(listp (cons 1 2))", T),
        ("(listp nil)", T),
        ("(listp ())", T),
    ],
)
def test_list_primitives(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(eq 'a 'b)", Nil),
        ("(eq 'a 'a)", T),
        ("(eq nil nil)", T),
        ("(eq nil '())", T),
        ("(eq '() '())", T),
        ("(eq T T)", T),
        ("(eq T nil)", Nil),
        ("(eq 1 1)", Nil),
        ("(eq 1.5 1.5)", Nil),
        ('(eq "a" "a")', Nil),
        ("(eq '(1) '(1))", Nil),
        ("(equal '(1 2) '(1 2))", T),
        ("(equal '(1 2) '(1 3))", Nil),
        ("(equal '(1 2) '(1 2 3))", Nil),
        ("(equal 1 1.0)", Nil),
        ("(equal 1.0 1.0)", T),
        ("(equal 2 2)", T),
        ('(equal "a" "a")', T),
        ("(equal \"a\" 'a)", Nil),
        ("(equal (cons 1 2) (cons 1 2))", T),
        ("(equal nil ())", T),
        ("(equal (+ 0.1 0.2) 0.3)", T),
    ],
)
def test_equality(run, source, expected):
    assert run(source) == expected


def test_eval(run):
    assert run("(eval '(car '(1 2)))") == 1
    assert run("(setq form '(+ 1 2)) (eval form)") == 3.0
    assert run("(eval 7)") == 7

# -----------------------------------------------------
# Control forms
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cond ((null 5) T) (T Nil))", Nil),
        ("(cond ((null ()) T) (T Nil))", T),
        ("(cond ((null 5) 1))", Nil),
        ("(cond)", Nil),
        ("(cond (nil 1) (() 2) (T 3))", 3),
        ("(cond (7))", 7),
        ("(cond ((> 2 1) (setq y 1) (setq y 2) y))", 2),
    ],
)
def test_cond(run, source, expected):
    assert run(source) == expected


def test_cond_stops_at_first_true_clause(run, capsys):
    run("(cond (T (print 'first)) (T (print 'second)))")
    assert capsys.readouterr().out == "first\n"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and)", T),
        ("(and T 1 'a)", T),
        ("(and T nil)", Nil),
        ("(and ())", Nil),
        ("(and T nil (car 5))", Nil),
    ],
)
def test_and(run, source, expected):
    assert run(source) == expected

# -----------------------------------------------------
# Definitions and user functions
# -----------------------------------------------------

def test_setq(run):
    assert run("(setq x 5)") == 5
    assert run("x") == 5
    assert run("(setq x (+ x 1))") == 6.0


def test_defun_returns_name_and_applies(run, capsys):
    assert run("(defun join (x y) (print y) (cons x y))") == Symbol("join")
    result = run("(join (quote a) 5)")
    assert result == Pair(Symbol("a"), 5)
    assert to_string(result) == "(a.5)"
    assert capsys.readouterr().out == "5\n"


def test_defun_stores_formals_and_body(run, env):
    run("(defun double (n) (* n 2))")
    assert env.lookup(Symbol("double")) == [
        [Symbol("n")],
        [[Symbol("*"), Symbol("n"), 2]],
    ]


def test_quoted_function_object_is_callable(run):
    assert run("(setq inc '((x) ((+ x 1)))) (inc 1)") == 2.0


def test_empty_body_returns_nil(run):
    assert run("(defun nothing () ) (nothing)") is Nil


def test_redefinition_uses_newest(run):
    assert run("(defun f () 1) (defun f () 2) (f)") == 2


def test_recursion(run):
    run("(defun fact (n) (cond ((<= n 1) 1) (T (* n (fact (- n 1))))))")
    assert run("(fact 5)") == 120.0


def test_callee_sees_caller_bindings(run):
    assert run("(setq z 10) (defun addz (x) (+ x z)) (addz 1)") == 11.0


def test_dynamic_visibility_of_caller_parameters(run):
    run("(defun inner () y)")
    run("(defun outer (y) (inner))")
    assert run("(outer 42)") == 42


def test_callee_definitions_do_not_leak(run):
    run("(defun f (x) (setq leaked 1) x)")
    assert run("(f 2)") == 2
    with pytest.raises(errors.MiniLispUnboundSymbol):
        run("leaked")


def test_parameters_are_call_local(run):
    run("(defun f (a) a) (f 1)")
    with pytest.raises(errors.MiniLispUnboundSymbol):
        run("a")


def test_parameters_shadow_globals(run):
    assert run("(setq x 1) (defun f (x) x) (f 2)") == 2
    assert run("x") == 1


def test_actuals_evaluated_in_caller_environment(run):
    assert run("(setq x 3) (defun f (x y) y) (f 10 x)") == 3


def test_setq_in_actuals_is_hidden_from_callee(run):
    run("(defun f (a) z)")
    with pytest.raises(errors.MiniLispUnboundSymbol):
        run("(f (setq z 7))")
    assert run("z") == 7


def test_setq_in_actuals_keeps_earlier_caller_bindings(run):
    run("(setq z 1) (defun f (a) (+ a z))")
    assert run("(f (setq z 7))") == 8.0
    assert run("z") == 7


def test_apply(run):
    assert run("(apply '+ '(1 2))") == 3.0
    assert run("(defun sq (x) (* x x)) (apply 'sq '(3))") == 9.0


def test_apply_builds_call_form(run):
    assert run("(setq fn 'cons) (apply fn '(1 2))") == Pair(1, 2)


def test_evaluate_all(env):
    forms = [[Symbol("setq"), Symbol("a"), 1], [Symbol("+"), Symbol("a"), 1]]
    assert evaluate_all(forms, env) == 2.0
    assert evaluate_all([], env) is Nil
