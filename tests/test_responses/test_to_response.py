import http

from funext.responses import HttpResponse, to_response
from funext.results import DataResult, Result


def test_success_with_data():
    assert to_response(DataResult.on_success([1, 2])) == HttpResponse(
        http.HTTPStatus.OK, [1, 2]
    )


def test_falsy_data_is_sent():
    assert to_response(DataResult.on_success(0)) == HttpResponse(
        http.HTTPStatus.OK, 0
    )


def test_success_without_data():
    assert to_response(Result.on_success()) == HttpResponse(
        http.HTTPStatus.NO_CONTENT
    )


def test_failures_give_server_error():
    expected = HttpResponse(http.HTTPStatus.INTERNAL_SERVER_ERROR)

    assert to_response(Result.on_failure("Nope")) == expected
    assert to_response(DataResult.on_no_data()) == expected
    assert to_response(DataResult.on_exception(OSError("Disk on fire"))) == expected
