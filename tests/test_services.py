"""
Tests for registration, resolve-and-record and queries, called directly.
"""
from concurrent.futures import ThreadPoolExecutor
from ipaddress import ip_address
from uuid import uuid4

import pytest
from pydantic import ValidationError

from redirect_app.exceptions import EntryNotFoundError
from redirect_app.services import QueryService, RegistrationService, Resolver
from redirect_app.store import LockMode, StoreFactory


@pytest.fixture
def registration(store):
    return RegistrationService(store)


@pytest.fixture
def resolver(store):
    return Resolver(store)


@pytest.fixture
def query(store):
    return QueryService(store)


class TestResolver:
    """Test the resolve-and-record transaction"""

    def test_round_trip(self, registration, resolver, visitor_ip):
        entry = registration.register("abc", "https://example.com")

        assert entry.code == "abc"
        assert entry.url == "https://example.com"
        assert resolver.resolve("abc", visitor_ip) == "https://example.com"

    def test_invalid_ip_leaves_store_usable(self, registration, resolver, store, visitor_ip):
        """Test a rejected address neither records a visit nor breaks the locks"""
        registration.register("abc", "https://example.com")

        with pytest.raises(ValidationError):
            resolver.resolve("abc", "not-an-ip")

        assert not store.poisoned
        assert store.visits.count() == 0
        assert resolver.resolve("abc", visitor_ip) == "https://example.com"
        assert store.visits.count() == 1

    def test_unknown_code(self, resolver, store, visitor_ip):
        """Test unknown codes raise and record no visit"""
        with pytest.raises(EntryNotFoundError):
            resolver.resolve("missing", visitor_ip)

        assert store.visits.count() == 0
        assert not store.poisoned

    def test_first_match(self, registration, resolver, visitor_ip):
        registration.register("x", "https://u1.example")
        registration.register("x", "https://u2.example")

        assert resolver.resolve("x", visitor_ip) == "https://u1.example"

    def test_visit_accumulation(self, registration, resolver, query, visitor_ip):
        """Test N resolves produce N visits with ordered timestamps"""
        entry = registration.register("n", "https://n.example")

        for _ in range(5):
            resolver.resolve("n", visitor_ip)

        visits = query.list_all_visits()
        assert len(visits) == 5
        assert all(visit.entry_id == entry.id for visit in visits)
        timestamps = [visit.timestamp for visit in visits]
        assert timestamps == sorted(timestamps)

    def test_ipv6_visitor(self, registration, resolver, query):
        registration.register("v6", "https://v6.example")

        resolver.resolve("v6", ip_address("2001:db8::1"))

        assert str(query.list_all_visits()[0].ip) == "2001:db8::1"

    def test_single_lock_mode(self, visitor_ip):
        """Test the shared coordinating lock supports the combined operation"""
        store = StoreFactory.build(LockMode.SINGLE)
        RegistrationService(store).register("s", "https://s.example")

        assert Resolver(store).resolve("s", visitor_ip) == "https://s.example"
        assert store.visits.count() == 1

    @pytest.mark.parametrize("mode", [LockMode.PER_COMPONENT, LockMode.SINGLE])
    def test_concurrent_resolves(self, mode, visitor_ip):
        """Test parallel resolves and registrations record exactly one visit each"""
        store = StoreFactory.build(mode)
        registration = RegistrationService(store)
        resolver = Resolver(store)
        query = QueryService(store)
        entry = registration.register("hot", "https://hot.example")

        def work(i):
            if i % 10 == 0:
                registration.register(f"cold{i}", "https://cold.example")
            return resolver.resolve("hot", visitor_ip)

        with ThreadPoolExecutor(max_workers=8) as pool:
            urls = list(pool.map(work, range(300)))

        assert urls == ["https://hot.example"] * 300
        assert len(query.list_visits_for_entry(entry.id)) == 300
        assert len(query.list_entries()) == 31


class TestQueryService:
    """Test read-only listings"""

    def test_list_entries(self, registration, query):
        a = registration.register("a", "https://a.example")
        b = registration.register("b", "https://b.example")

        assert query.list_entries() == [a, b]

    def test_visits_for_entry_subset(self, registration, resolver, query, visitor_ip):
        """Test the per-entry listing is exactly the matching subset in order"""
        a = registration.register("a", "https://a.example")
        b = registration.register("b", "https://b.example")
        for code in ["a", "b", "a", "b", "a"]:
            resolver.resolve(code, visitor_ip)

        all_visits = query.list_all_visits()
        assert query.list_visits_for_entry(a.id) == [v for v in all_visits if v.entry_id == a.id]
        assert query.list_visits_for_entry(b.id) == [v for v in all_visits if v.entry_id == b.id]
        assert len(query.list_visits_for_entry(a.id)) == 3

    def test_visits_for_entry_without_visits(self, registration, query):
        entry = registration.register("quiet", "https://q.example")

        assert query.list_visits_for_entry(entry.id) == []

    def test_visits_for_unknown_entry(self, query):
        with pytest.raises(EntryNotFoundError):
            query.list_visits_for_entry(uuid4())
