"""Unit tests for TicketStore."""

import pytest

from ticketapp.context import AppContext
from ticketapp.exceptions import TicketNotFoundError, ValidationError
from ticketapp.models import Ticket, TicketPriority, TicketStats, TicketStatus
from ticketapp.storage import Collection
from ticketapp.tickets import TicketStore, next_ticket_id


@pytest.fixture
def seeded(store: TicketStore) -> TicketStore:
    store.create("Printer jam", "open", description="Tray 3 is stuck")
    store.create("VPN down", "in_progress", priority="high")
    store.create("Laptop battery", "closed", priority="low", description="Swelling, replace")
    store.create("Printer toner", "closed")
    return store


@pytest.mark.unit
class TestCreate:
    """Tests for create."""

    def test_scenario_printer_then_vpn(self, store: TicketStore) -> None:
        first = store.create("Printer jam", "open")

        assert first.model_dump(mode="json") == {
            "id": 1,
            "title": "Printer jam",
            "status": "open",
            "priority": "medium",
            "description": "",
        }
        assert store.create("VPN down", "open").id == 2

    def test_id_is_max_plus_one(self, store: TicketStore) -> None:
        for title in ("a", "b", "c"):
            store.create(title, "open")
        store.delete(2)

        assert store.create("d", "open").id == 4

    def test_id_reused_after_deleting_highest(self, store: TicketStore) -> None:
        store.create("a", "open")
        store.create("b", "open")
        store.delete(2)

        assert store.create("c", "open").id == 2

    def test_trims_title_and_description(self, store: TicketStore) -> None:
        ticket = store.create("  Spaced  ", "open", description="  body  ")

        assert ticket.title == "Spaced"
        assert ticket.description == "body"

    @pytest.mark.parametrize("title", ["", "   ", None])
    def test_title_required(self, store: TicketStore, title: str | None) -> None:
        with pytest.raises(ValidationError) as exc_info:
            store.create(title, "open")  # type: ignore[arg-type]

        assert exc_info.value.field == "title"
        assert store.list() == []

    @pytest.mark.parametrize("status", ["", "pending", "OPEN", None])
    def test_status_validated(self, store: TicketStore, status: str | None) -> None:
        with pytest.raises(ValidationError) as exc_info:
            store.create("Title", status)  # type: ignore[arg-type]

        assert exc_info.value.field == "status"

    def test_title_checked_before_status(self, store: TicketStore) -> None:
        with pytest.raises(ValidationError) as exc_info:
            store.create("", "bogus")

        assert exc_info.value.field == "title"

    def test_invalid_priority(self, store: TicketStore) -> None:
        with pytest.raises(ValidationError) as exc_info:
            store.create("Title", "open", priority="urgent")

        assert exc_info.value.field == "priority"

    def test_next_ticket_id_helper(self) -> None:
        assert next_ticket_id([]) == 1
        tickets = [Ticket(id=7, title="x", status=TicketStatus.OPEN)]
        assert next_ticket_id(tickets) == 8


@pytest.mark.unit
class TestList:
    """Tests for list filtering and search."""

    def test_insertion_order(self, seeded: TicketStore) -> None:
        assert [t.id for t in seeded.list()] == [1, 2, 3, 4]

    def test_status_filter_is_exact_subset(self, seeded: TicketStore) -> None:
        closed = seeded.list(status="closed")

        assert [t.id for t in closed] == [3, 4]
        assert all(t.status is TicketStatus.CLOSED for t in closed)

    def test_search_title_case_insensitive(self, seeded: TicketStore) -> None:
        assert [t.id for t in seeded.list(search="PRINTER")] == [1, 4]

    def test_search_matches_description(self, seeded: TicketStore) -> None:
        assert [t.id for t in seeded.list(search="tray")] == [1]

    def test_filter_and_search_intersect(self, seeded: TicketStore) -> None:
        assert [t.id for t in seeded.list(status="open", search="printer")] == [1]
        assert seeded.list(status="in_progress", search="printer") == []

    def test_blank_search_matches_all(self, seeded: TicketStore) -> None:
        assert len(seeded.list(search="   ")) == 4


@pytest.mark.unit
class TestUpdate:
    """Tests for update."""

    def test_only_target_changes(self, seeded: TicketStore) -> None:
        before = seeded.list()

        updated = seeded.update(2, "VPN fixed", "closed", description="Rebooted gateway")

        after = seeded.list()
        assert len(after) == len(before)
        assert updated == Ticket(
            id=2,
            title="VPN fixed",
            status=TicketStatus.CLOSED,
            priority=TicketPriority.HIGH,
            description="Rebooted gateway",
        )
        assert after[1] == updated
        assert [t for t in after if t.id != 2] == [t for t in before if t.id != 2]

    def test_unspecified_optional_fields_kept(self, seeded: TicketStore) -> None:
        updated = seeded.update(3, "Laptop battery", "open")

        assert updated.priority is TicketPriority.LOW
        assert updated.description == "Swelling, replace"

    def test_unknown_id(self, seeded: TicketStore) -> None:
        with pytest.raises(TicketNotFoundError):
            seeded.update(99, "x", "open")

    def test_validation(self, seeded: TicketStore) -> None:
        with pytest.raises(ValidationError):
            seeded.update(1, " ", "open")

        assert seeded.get(1).title == "Printer jam"


@pytest.mark.unit
class TestDelete:
    """Tests for delete."""

    def test_removes_ticket(self, seeded: TicketStore) -> None:
        seeded.delete(1)

        assert [t.id for t in seeded.list()] == [2, 3, 4]

    def test_unknown_id_is_noop(self, seeded: TicketStore) -> None:
        seeded.delete(42)

        assert len(seeded.list()) == 4

    def test_delete_on_empty_store(self, store: TicketStore) -> None:
        store.delete(1)

        assert store.is_empty()


@pytest.mark.unit
class TestStatsAndSeed:
    """Tests for stats, get and replace_all."""

    def test_stats(self, seeded: TicketStore) -> None:
        assert seeded.stats() == TicketStats(total=4, open=1, in_progress=1, closed=2)

    def test_stats_empty(self, store: TicketStore) -> None:
        assert store.stats() == TicketStats(total=0, open=0, in_progress=0, closed=0)

    def test_get(self, seeded: TicketStore) -> None:
        assert seeded.get(2).title == "VPN down"
        with pytest.raises(TicketNotFoundError):
            seeded.get(5)

    def test_replace_all_skips_invalid_records(self, store: TicketStore) -> None:
        stored = store.replace_all(
            [
                {"id": 5, "title": "Seeded", "status": "open", "description": None},
                {"id": 6, "title": "", "status": "open"},
                {"title": "no id", "status": "open"},
            ]
        )

        assert [t.id for t in stored] == [5]
        assert store.create("Next", "open").id == 6

    def test_replace_all_keeps_first_of_duplicate_ids(self, store: TicketStore) -> None:
        stored = store.replace_all(
            [
                {"id": 1, "title": "a", "status": "open"},
                {"id": 1, "title": "b", "status": "open"},
                {"id": 2, "title": "c", "status": "open"},
            ]
        )

        assert [(t.id, t.title) for t in stored] == [(1, "a"), (2, "c")]

        store.update(1, "edited", "closed")
        assert [(t.id, t.title) for t in store.list()] == [(1, "edited"), (2, "c")]

    def test_unreadable_record_does_not_cost_valid_ones(
        self, context: AppContext, store: TicketStore
    ) -> None:
        context.storage.save(
            Collection.TICKETS,
            [
                {"id": 1, "title": "A", "status": "open"},
                {"id": 2, "title": "B", "status": "pending"},
                {"id": 3, "title": "C", "status": "closed"},
            ],
        )

        store.create("New", "open")

        assert [t.id for t in store.list()] == [1, 3, 4]

    def test_stores_share_context(self, context: AppContext, store: TicketStore) -> None:
        store.create("Shared", "open")

        assert [t.title for t in TicketStore(context).list()] == ["Shared"]
