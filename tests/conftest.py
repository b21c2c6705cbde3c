# tests/conftest.py
from txparsec.Result import Failure, Success


def assert_result_eq(res1, res2):
    """
    Deep comparison of two Results.
    """
    assert res1.type == res2.type, f"Result mismatch: {res1.type} != {res2.type}"
    assert res1.meta == res2.meta

    if isinstance(res1, Success):
        assert res1.data == res2.data
    else:
        assert isinstance(res2, Failure)
        assert res1.code == res2.code
        assert res1.error_message == res2.error_message

