"""Shared fixtures built on the fake converter, so the core runs without jdatetime."""

import pytest

from jalaali_datepicker.business_logic import CalendarManager, RangeSelectionManager
from tests.fakes import FakeConverter


@pytest.fixture
def fake_converter() -> FakeConverter:
    return FakeConverter()


@pytest.fixture
def calendar_manager(fake_converter) -> CalendarManager:
    return CalendarManager(fake_converter)


@pytest.fixture
def range_selection_manager(calendar_manager) -> RangeSelectionManager:
    return RangeSelectionManager(calendar_manager)
