"""Tests for the exception hierarchy and messages."""
import pytest

from delaunay.core.errors import (
    CollinearPointsError,
    DelaunayError,
    DuplicatePointsError,
    InvalidTriangleError,
    NumericalError,
)


@pytest.mark.parametrize('cls', [CollinearPointsError, DuplicatePointsError,
                                 InvalidTriangleError, NumericalError])
def test_hierarchy(cls):
    assert issubclass(cls, DelaunayError)
    assert issubclass(cls, Exception)


def test_builtin_bases():
    assert issubclass(InvalidTriangleError, ValueError)
    assert issubclass(NumericalError, ArithmeticError)


def test_messages():
    assert 'collinear' in str(CollinearPointsError())
    assert 'duplicate' in str(DuplicatePointsError())
    assert 'Invalid triangle' in str(InvalidTriangleError())
    err = NumericalError("Test message")
    assert 'Test message' in str(err)
    assert str(err).startswith('Numerical calculation error')
    assert str(NumericalError()) == 'Numerical calculation error'
    assert str(DelaunayError("General error")) == "General error"
    assert DelaunayError("General error").message == "General error"


def test_equality():
    assert CollinearPointsError() == CollinearPointsError()
    assert CollinearPointsError() != DuplicatePointsError()
    assert NumericalError("a") == NumericalError("a")
    assert NumericalError("a") != NumericalError("b")
    assert len({InvalidTriangleError(), InvalidTriangleError()}) == 1
