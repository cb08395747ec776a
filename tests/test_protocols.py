from pydantic_core import PydanticCustomError

from generative_check import (
    GenerativeCheckError,
    GeneratorProtocol,
    PredicateProtocol,
    Reporter,
    ReporterProtocol,
    ShrinkerProtocol,
    generators,
    shrinkers,
)


def test_stock_callables_satisfy_protocols() -> None:
    assert isinstance(generators.trial_index, GeneratorProtocol)
    assert isinstance(generators.integers(10), GeneratorProtocol)
    assert isinstance(shrinkers.shrink_integer, ShrinkerProtocol)
    assert isinstance(lambda x: x > 0, PredicateProtocol)


def test_reporter_satisfies_protocol() -> None:
    assert isinstance(Reporter(), ReporterProtocol)
    assert not isinstance(object(), ReporterProtocol)


def test_invalid_argument_error_message() -> None:
    error = GenerativeCheckError.invalid_argument("limit", -2, "must be >= 0")
    assert isinstance(error, PydanticCustomError)
    assert error.type == "invalid_argument"
    assert error.message() == "limit=-2: must be >= 0"
    assert error.context["package"] == "generative_check"


def test_wrap_pydantic_error() -> None:
    original = PydanticCustomError("too_small", "value {v} too small", {"v": 1})
    wrapped = GenerativeCheckError.from_pydantic_error(original)
    assert wrapped.type == "too_small"
    assert wrapped.context == {"package": "generative_check", "v": 1}
