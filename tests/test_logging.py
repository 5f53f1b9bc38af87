import pytest

from core.logging import BusinessEvents, test_output


@pytest.mark.asyncio
async def test_order_payment_is_logged(orders):
    test_output.clear()

    await orders.update("order_1", {"pay": True})

    events = [e for e in test_output if e["event"] == BusinessEvents.ORDER_PAY]
    assert events[0]["order_id"] == "order_1"
    assert events[0]["level"] == "info"


def test_api_entry_is_logged(client):
    test_output.clear()

    client.get("/health")

    entries = [e for e in test_output if e["event"] == BusinessEvents.API_ENTRY]
    assert entries[-1]["method"] == "GET"
    assert entries[-1]["url"].endswith("/health")
