"""Property tests for batch reporting of the aggregate meter.

- Nothing is observable before the first batch closes
- A closed batch reports its exact min/max and single-precision mean
- The report does not move while the next batch fills
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from opmeter import AggregateMeter, Report
from opmeter.numeric import round_f32

from .strategies import (
    dyadic_floats,
    float_elements,
    float_samples,
    integer_elements,
    integer_samples,
    small_thresholds,
    thresholds,
)


def _expected(batch: list) -> Report:
    return Report(min(batch), round_f32(sum(batch) / len(batch)), max(batch))


@given(data=st.data(), threshold=small_thresholds, element=integer_elements)
@settings(max_examples=300)
def test_integer_prefixes(data, threshold, element):
    """Property: after m < k adds nothing is reported; at m == k the batch stats are."""
    samples = data.draw(integer_samples(element, min_size=threshold, max_size=threshold))
    meter = AggregateMeter(threshold, element=element)

    for m, sample in enumerate(samples, start=1):
        meter.add(sample)
        if m < threshold:
            assert meter.average() is None
            assert meter.values() is None

    assert meter.values() == _expected(samples)


@given(data=st.data(), threshold=small_thresholds, element=float_elements)
@settings(max_examples=300)
def test_float_prefixes(data, threshold, element):
    samples = data.draw(float_samples(min_size=threshold, max_size=threshold))
    meter = AggregateMeter(threshold, element=element)

    for sample in samples[:-1]:
        meter.add(sample)
        assert meter.average() is None

    meter.add(samples[-1])
    assert meter.values() == _expected(samples)


@given(data=st.data(), threshold=small_thresholds, element=integer_elements)
@settings(max_examples=200)
def test_report_tracks_latest_closed_batch(data, threshold, element):
    """Property: the report always describes the most recent full batch."""
    samples = data.draw(integer_samples(element, min_size=threshold, max_size=80))
    meter = AggregateMeter(threshold, element=element)

    for m, sample in enumerate(samples, start=1):
        meter.add(sample)
        closed = m - m % threshold
        if closed == 0:
            assert meter.values() is None
        else:
            assert meter.values() == _expected(samples[closed - threshold : closed])
        assert 0 <= meter.count < threshold


@given(data=st.data(), threshold=st.integers(min_value=2, max_value=16))
@settings(max_examples=200)
def test_report_stable_between_closes(data, threshold):
    """Property: adds short of the next close never alter min, avg or max."""
    first = data.draw(float_samples(min_size=threshold, max_size=threshold))
    pending = data.draw(float_samples(min_size=0, max_size=threshold - 1))
    meter = AggregateMeter(threshold)

    for sample in first:
        meter.add(sample)
    closed = meter.values()

    for sample in pending:
        meter.add(sample)
        assert meter.values() == closed
        assert meter.average() == closed.avg


@given(threshold=thresholds, value=dyadic_floats())
@settings(max_examples=200)
def test_all_equal_samples(threshold, value):
    meter = AggregateMeter(threshold)
    for _ in range(threshold):
        meter.add(value)
    assert meter.values() == Report(value, value, value)


@given(data=st.data(), threshold=small_thresholds)
@settings(max_examples=200)
def test_min_avg_max_ordering(data, threshold):
    samples = data.draw(float_samples(min_size=threshold, max_size=threshold))
    meter = AggregateMeter(threshold)
    for sample in samples:
        meter.add(sample)
    report = meter.values()
    assert report.min <= report.avg <= report.max


@given(unit=st.text(max_size=8), threshold=small_thresholds)
def test_unit_preserved(unit, threshold):
    meter = AggregateMeter(threshold).with_unit(unit)
    for _ in range(threshold):
        meter.add(1.0)
    assert meter.values().unit == unit
