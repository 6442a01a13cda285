import io

import pytest

from bracketcalc.app import (
    BUTTON_GRID,
    AddInput,
    Calculator,
    ClearInput,
    Color,
    DeleteLast,
    Evaluate,
    InputChanged,
    button_message,
    darken_color,
    lighten_color,
    main,
)
from bracketcalc.evaluator import ParseError, evaluate
from bracketcalc.lexer import LexError


def _run(calc, text):
    calc.update(InputChanged(text))
    calc.update(Evaluate())
    return calc


def test_lighten_clamps_to_one_and_keeps_alpha():
    color = Color(0.2, 0.5, 0.9, 0.4)
    result = lighten_color(color, 1.0)
    assert (result.r, result.g, result.b) == (1.0, 1.0, 1.0)
    assert result.a == 0.4


def test_darken_clamps_to_zero_and_keeps_alpha():
    color = Color(0.2, 0.5, 0.9, 0.4)
    result = darken_color(color, 1.0)
    assert (result.r, result.g, result.b) == (0.0, 0.0, 0.0)
    assert result.a == 0.4


def test_lighten_then_darken_round_trip():
    color = Color(0.3, 0.4, 0.5, 0.7)
    back = darken_color(lighten_color(color, 0.2), 0.2)
    assert back.r == pytest.approx(color.r)
    assert back.g == pytest.approx(color.g)
    assert back.b == pytest.approx(color.b)
    assert back.a == color.a


def test_button_message_special_labels():
    assert button_message("C") == ClearInput()
    assert button_message("D") == DeleteLast()
    assert button_message("=") == Evaluate()


def test_button_message_other_labels_add_their_character():
    labels = [label for row in BUTTON_GRID for label in row if label not in "CD="]
    assert [button_message(label) for label in labels] == [AddInput(label) for label in labels]


def test_button_message_empty_label_rejected():
    with pytest.raises(ValueError):
        button_message("")


def test_first_update_sets_output_to_zero():
    calc = Calculator()
    calc.update(AddInput("5"))
    assert calc.output_value == "0"
    assert calc.input_value == "5"
    assert calc.display_text() == "0"


def test_buttons_build_and_evaluate_expression():
    calc = Calculator()
    for label in "9*3=":
        calc.update(button_message(label))
    assert calc.display_text() == "27"


def test_delete_last_and_clear():
    calc = Calculator()
    calc.update(InputChanged("123"))
    calc.update(DeleteLast())
    assert calc.input_value == "12"
    calc.update(ClearInput())
    assert calc.input_value == ""
    calc.update(DeleteLast())
    assert calc.input_value == ""


def test_input_changed_replaces_input():
    calc = Calculator()
    calc.update(InputChanged("1+1"))
    calc.update(InputChanged("4/2"))
    assert calc.input_value == "4/2"


@pytest.mark.parametrize("expression", ["7/2", "1.5*4", "(1+2)*3", "10-2.25"])
def test_output_matches_evaluator(expression):
    calc = _run(Calculator(), expression)
    assert calc.error_message is None
    assert float(calc.output_value) == evaluate(expression)


@pytest.mark.parametrize("text", ["100000000000000000000", "0.0000001"])
def test_numbers_printed_without_exponent(text):
    calc = _run(Calculator(), text)
    assert calc.output_value == text


def test_division_by_zero_shows_infinity():
    calc = _run(Calculator(), "1/0")
    assert calc.output_value == "inf"


def test_parse_error_becomes_error_message():
    expression = "(1+2"
    with pytest.raises(ParseError) as info:
        evaluate(expression)
    calc = _run(Calculator(), expression)
    assert calc.error_message == f"Error: {info.value}"
    assert calc.display_text() == calc.error_message


def test_error_persists_until_input_is_emptied():
    calc = _run(Calculator(), "(1+2")
    message = calc.error_message
    _run(calc, "2+2")
    assert calc.display_text() == message
    calc.update(ClearInput())
    calc.update(InputChanged("2+2"))
    assert calc.error_message is None


def test_invalid_character_raises_lex_error():
    calc = Calculator()
    calc.update(InputChanged("2^3"))
    with pytest.raises(LexError):
        calc.update(Evaluate())


def test_main_with_arguments(capsys):
    assert main(["9*3", "(1+2)*3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "27"
    assert float(lines[1]) == evaluate("(1+2)*3")


def test_main_reports_errors(capsys):
    assert main(["(1+2", "2^3", "1+1"]) == 1
    captured = capsys.readouterr()
    assert float(captured.out.strip()) == evaluate("1+1")
    assert captured.err.count("Error: ") == 2


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9*3\n\n4/2\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "27"
    assert float(lines[1]) == evaluate("4/2")