import pytest

from testsuites.ui_testing.pages.home_page import HomePage
from testsuites.unit.fakes import FakeLocator, FakePage


@pytest.mark.asyncio
async def test_open_and_title():
    page = FakePage(title="Agoda | Hotels, flights and more")
    home = HomePage(page, base_url="https://example.test")

    assert await home.open() is home
    assert page.visited[0]["url"] == "https://example.test/"
    assert "Agoda" in await home.get_page_title()


def test_home_page_composes_navigation_on_same_page():
    page = FakePage()
    home = HomePage(page, base_url="https://example.test")

    assert home.navigation.page is page
    assert home.navigation.base_url == "https://example.test"


@pytest.mark.asyncio
async def test_search_hotels_fills_destination_and_submits():
    page = FakePage()
    destination = page.add("placeholder=destination", FakeLocator())
    search = page.add("role=button[name=search]", FakeLocator())

    await HomePage(page, base_url="https://example.test").search_hotels("Bangkok")

    assert destination.fills == ["Bangkok"]
    assert len(search.clicks) == 1
