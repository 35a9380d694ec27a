import json

from typer.testing import CliRunner

from calcfixtures.__main__ import app

runner = CliRunner()


def test_list():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0


def test_list_unknown_framework():
    result = runner.invoke(app, ["list", "--framework", "junit"])
    assert result.exit_code == 1


def test_calc_add():
    result = runner.invoke(app, ["calc", "add", "3", "5.5"])
    assert result.exit_code == 0
    assert "8.5" in result.output


def test_calc_divide_exact():
    result = runner.invoke(app, ["calc", "divide", "3", "2"])
    assert result.exit_code == 0
    assert "1.5" in result.output


def test_calc_factorial():
    result = runner.invoke(app, ["calc", "factorial", "3"])
    assert result.exit_code == 0
    assert "6" in result.output


def test_calc_divide_by_zero():
    result = runner.invoke(app, ["calc", "divide", "3", "0"])
    assert result.exit_code == 1
    assert "DivisionByZero" in result.output


def test_calc_invalid_operation():
    result = runner.invoke(app, ["calc", "modulo", "3", "2"])
    assert result.exit_code == 1


def test_calc_wrong_arity():
    result = runner.invoke(app, ["calc", "add", "3"])
    assert result.exit_code == 1


def test_check_all():
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 0
    assert "All fixtures behaved as classified" in result.output


def test_check_json():
    result = runner.invoke(app, ["check", "failing.xunit", "passing.xunit.1", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["total"] == 2
    assert data["ok"] is True


def test_check_unknown_fixture():
    result = runner.invoke(app, ["check", "passing.pytest.1"])
    assert result.exit_code == 1


def test_check_framework_from_env():
    result = runner.invoke(app, ["check", "--json"], env={"CALCFIXTURES_FRAMEWORK": "nunit3"})
    assert result.exit_code == 0
    assert json.loads(result.output)["total"] == 2


def test_list_failing_only():
    result = runner.invoke(app, ["list", "--failing"])
    assert result.exit_code == 0
    assert "failing.mbunit" in result.output
    assert "passing." not in result.output


def test_list_passing_only():
    result = runner.invoke(app, ["list", "--passing"])
    assert result.exit_code == 0
    assert "passing.nunit3.2" in result.output
    assert "failing." not in result.output


def test_calc_overflow_exits_cleanly():
    result = runner.invoke(app, ["calc", "multiply", "1E999999", "10"])
    assert result.exit_code == 1
    assert "Overflow" in result.output
    assert "Traceback" not in result.output
    assert isinstance(result.exception, SystemExit)


def test_calc_result_beyond_max():
    result = runner.invoke(app, ["calc", "add", "79228162514264337593543950335", "1"])
    assert result.exit_code == 1
    assert "Overflow" in result.output


def test_check_names_filtered_by_framework():
    result = runner.invoke(
        app, ["check", "failing.xunit", "passing.nunit.1", "--framework", "xunit"],
    )
    assert result.exit_code == 0
    assert "Skipping passing.nunit.1" in result.output


def test_check_names_with_unknown_framework():
    result = runner.invoke(app, ["check", "failing.xunit", "--framework", "junit"])
    assert result.exit_code == 1
