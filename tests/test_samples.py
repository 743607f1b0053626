"""Unit tests for sample runners."""

import pytest
from unittest.mock import Mock

from democode.samples import (
    SAMPLE_HANDLERS,
    InterfaceSample,
    LambdaSample,
    NullableSample,
    PropertySample,
)


def test_sample_table_lists_all_samples():
    """Dispatch table maps names to runners."""
    assert SAMPLE_HANDLERS == {
        'interface': InterfaceSample,
        'property': PropertySample,
        'nullable': NullableSample,
        'lambda': LambdaSample,
    }


@pytest.mark.asyncio
async def test_interface_sample_logs_message_and_exception(recording_sink):
    """Interface sample logs plain message then formatted exception."""
    logger = recording_sink

    await InterfaceSample(logger).handle()

    assert logger.messages[0] == "Test Message"
    assert logger.messages[1].startswith("ERROR - NotImplementedError\n    ")
    assert len(logger.messages) == 2


@pytest.mark.asyncio
async def test_property_sample_prints_dimensions(capsys):
    """Property sample prints triangle and square."""
    await PropertySample(Mock()).handle()

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Triangle: 3 sides with length of 5",
        "   Perimeter is 15",
        "Square: 4 sides with length of 7",
        "   Perimeter is 28",
    ]


@pytest.mark.asyncio
async def test_nullable_sample_prints_values(capsys, recording_sink):
    """Nullable sample parses fixed inputs through the logger."""
    logger = recording_sink

    await NullableSample(logger).handle()

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Output from console: value 123",
        "Output from console: value 345",
        "Output from console: value 0",
        "Output from console: value 0",
    ]
    assert logger.messages == [
        "Success: parsed 123 as 123",
        "Success: parsed 345 as 345",
        "Failure: could not parse abc",
        "Failure: could not parse ",
    ]


@pytest.mark.asyncio
async def test_nullable_sample_reports_missing_logger(capsys):
    """Missing logger is reported, not raised."""
    await NullableSample(None).handle()

    out = capsys.readouterr().out
    assert out.startswith("ERROR - ValueError\n")
    assert "Output from console" not in out


@pytest.mark.asyncio
async def test_lambda_sample_prints_every_number(capsys):
    """Each number printed once, order not guaranteed."""
    logger = Mock()

    await LambdaSample(logger, count=20, delay=0).handle()

    out = capsys.readouterr().out.splitlines()
    assert sorted(out) == sorted(f"Number: {n}" for n in range(1, 21))
    logger.log.assert_called_once()


@pytest.mark.parametrize(
    "count, delay",
    [(0, 0.0), (5, -1.0), (5, float("inf")), (5, float("nan"))],
)
def test_lambda_sample_rejects_bad_settings(count, delay):
    """Count below one or a negative or non-finite delay is invalid."""
    with pytest.raises(ValueError):
        LambdaSample(Mock(), count=count, delay=delay)
