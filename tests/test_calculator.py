import pytest

from algobox.calculator import Operator, calculate, main


def test_operator_symbols():
    assert {op.value for op in Operator} == {"+", "-", "*", "/"}
    for op in Operator:
        assert Operator(op.value) is op


@pytest.mark.parametrize("a,b", [(2, 3), (-1.5, 4.25), (1e6, -7), (0, 0)])
def test_add_and_subtract_are_inverse(a, b):
    assert calculate("-", calculate("+", a, b), b) == pytest.approx(a)


@pytest.mark.parametrize("a,b", [(2, 3), (-1.5, 4.25), (1e6, -7), (0, 9)])
def test_multiply_and_divide_are_inverse(a, b):
    assert calculate("/", calculate("*", a, b), b) == pytest.approx(a)


def test_accepts_enum_members():
    assert calculate(Operator.ADD, 4, 5) == calculate("+", 4, 5)
    assert calculate(Operator.MULTIPLY, 4, 5) == calculate("*", 5, 4)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate("/", 1, 0)


@pytest.mark.parametrize("symbol", ["%", "", "x", "++"])
def test_invalid_operator(symbol):
    with pytest.raises(ValueError):
        calculate(symbol, 1, 2)


def test_main_with_arguments(capsys):
    assert main(["+", "2", "3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Welcome to the Calculator App!", "Result: 5.00"]


def test_main_division_by_zero(capsys):
    assert main(["/", "1", "0"]) == 0
    assert "Error: Division by zero is not allowed." in capsys.readouterr().out


def test_main_invalid_operator(capsys):
    assert main(["%", "1", "2"]) == 0
    assert "Error: Invalid operator." in capsys.readouterr().out


def test_main_interactive(monkeypatch, capsys):
    answers = iter(["  * ", "2", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Result: 6.00"