import pytest

from testsuites.ui_testing.framework.smart_locator import ElementNotFoundError, SmartLocator
from testsuites.unit.fakes import FakeLocator, FakePage


PRIMARY = '[data-selenium="agodaFlightsTab"]'
FALLBACK = '[data-testid="agodaFlightsTab"]'


def make_locator(page):
    return SmartLocator(
        page,
        element_name="Flights tab",
        locators={"primary": PRIMARY, "fallback_1": FALLBACK},
    )


@pytest.mark.asyncio
async def test_primary_selector_wins():
    page = FakePage({PRIMARY: FakeLocator(), FALLBACK: FakeLocator()})
    smart = make_locator(page)

    found = await smart.locate(timeout=100)

    assert found is page.selectors[PRIMARY]
    assert smart.health_records[0].used_fallback is False
    assert "No maintenance needed" in smart.get_health_report()


@pytest.mark.asyncio
async def test_fallback_is_used_and_reported():
    page = FakePage({FALLBACK: FakeLocator()})
    smart = make_locator(page)

    await smart.click(timeout=100)

    assert len(page.selectors[FALLBACK].clicks) == 1
    report = smart.get_health_report()
    assert "Flights tab" in report
    assert PRIMARY in report
    assert FALLBACK in report


@pytest.mark.asyncio
async def test_hidden_element_does_not_count_as_found():
    page = FakePage({PRIMARY: FakeLocator(visible=False)})
    smart = make_locator(page)

    assert await smart.is_visible(timeout=100) is False


@pytest.mark.asyncio
async def test_all_strategies_failing_raises():
    smart = make_locator(FakePage())

    with pytest.raises(ElementNotFoundError) as excinfo:
        await smart.locate(timeout=100)

    assert "primary" in str(excinfo.value)
    assert "fallback_1" in str(excinfo.value)


@pytest.mark.asyncio
async def test_no_locators_raises():
    with pytest.raises(ElementNotFoundError):
        await SmartLocator(FakePage(), element_name="ghost").locate()
