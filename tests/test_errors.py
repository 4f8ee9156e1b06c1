from boilgen.errors import BoilError, is_boil_err, wrap_err


def test_plain_error_is_not_boil_error():
    assert is_boil_err(ValueError("test error")) is False


def test_wrapped_error_keeps_message():
    err = wrap_err(ValueError("test error"))
    assert str(err) == "test error"
    assert is_boil_err(err) is True


def test_wrapped_error_keeps_cause():
    inner = KeyError("missing")
    err = wrap_err(inner)
    assert err.err is inner
    assert err.__cause__ is inner


def test_wrap_err_returns_boil_error_with_inner_args():
    err = wrap_err(RuntimeError("boom"))
    assert isinstance(err, BoilError)
    assert err.err.args == ("boom",)
    assert str(err) == "boom"