"""
Tests for evaluation of statements in hrylang.
"""
import io

import pytest

from hrylang.exceptions import (
    TypeMismatchException,
    UndefinedVariableException,
    UnknownOpException,
)
from hrylang.interpreter import Interpreter
from hrylang.nodes import (
    BinaryExpression,
    Identifier,
    NumberLiteral,
    PrintStatement,
    StringLiteral,
    VariableDeclaration,
)
from hrylang.operations import Op
from hrylang.values import Number, Text

from hrylang.tests.utils import execute_source


def test_declare_then_print_sum(capsys):
    ast = [
        VariableDeclaration(
            "x",
            "bilang",
            BinaryExpression(Op.ADD, NumberLiteral(2.0), NumberLiteral(3.0)),
        ),
        PrintStatement(Identifier("x")),
    ]
    interpreter = Interpreter('<test>')
    interpreter.interpret(ast)
    assert capsys.readouterr().out == "5\n"
    assert interpreter.vars == {"x": Number(5.0)}


def test_string_concatenation_has_no_separator():
    interpreter = execute_source('bagay s -> teksto = "Hi" + "!";')
    assert interpreter.vars["s"] == Text("Hi!")


def test_subtraction(capsys):
    execute_source("bagay x -> bilang = 5 - 2; ipakita x; ipakita 1 - 4;")
    assert capsys.readouterr().out.splitlines() == ["3", "-3"]


def test_redeclaration_overwrites(capsys):
    interpreter = execute_source(
        'bagay x -> bilang = 1;'
        'bagay x -> teksto = "dalawa";'
        'ipakita x;'
    )
    assert interpreter.vars == {"x": Text("dalawa")}
    assert capsys.readouterr().out == "dalawa\n"


def test_later_statements_see_earlier_bindings(capsys):
    execute_source(
        'bagay a -> bilang = 10;'
        'bagay b -> bilang = a + 5;'
        'bagay greeting -> teksto = "Kumusta, " + "mundo";'
        'ipakita b;'
        'ipakita greeting;'
    )
    assert capsys.readouterr().out.splitlines() == ["15", "Kumusta, mundo"]


def test_declaration_produces_no_output(capsys):
    execute_source("bagay x -> bilang = 2 + 3;")
    assert capsys.readouterr().out == ""


def test_output_stream_can_be_redirected():
    out = io.StringIO()
    interpreter = Interpreter('<test>', out=out)
    interpreter.interpret([PrintStatement(StringLiteral("hello"))])
    assert out.getvalue() == "hello\n"


def test_undefined_variable_raises():
    with pytest.raises(UndefinedVariableException) as excinfo:
        execute_source("ipakita nowhere;")
    assert excinfo.value.varname == "nowhere"


def test_mixed_addition_raises():
    with pytest.raises(TypeMismatchException):
        execute_source('bagay x -> teksto = "a" + 1;')


def test_unknown_operator_raises():
    node = BinaryExpression("*", NumberLiteral(2.0), NumberLiteral(3.0))
    with pytest.raises(UnknownOpException):
        Interpreter('<test>').eval_expr(node)


def test_first_error_stops_the_run(capsys):
    with pytest.raises(UndefinedVariableException):
        execute_source('ipakita "before"; ipakita missing; ipakita "after";')
    assert capsys.readouterr().out == "before\n"


def test_interpreters_do_not_share_bindings():
    first = execute_source("bagay x -> bilang = 1;")
    second = Interpreter('<test>')
    assert "x" in first.vars
    assert second.vars == {}
