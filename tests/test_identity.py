"""Unit tests for instance identity assignment."""

from threading import Thread

import pytest

from mvcmodel import CounterIdentity, IdentityGenerator, Model, default_identity


class Note(Model):
    DEFAULT_OPTIONS = {"text": ""}


class Task(Model):
    DEFAULT_OPTIONS = {"done": False}


class TestCounterIdentity:
    """Test the counter itself."""

    @pytest.mark.unit
    def test_starts_at_zero(self, identity):
        assert identity.next_id() == 0
        assert identity.next_id() == 1
        assert identity.peek() == 2

    @pytest.mark.unit
    def test_custom_start(self):
        assert CounterIdentity(start=100).next_id() == 100

    @pytest.mark.unit
    def test_reset(self, identity):
        identity.next_id()
        identity.next_id()

        identity.reset()

        assert identity.next_id() == 0

    @pytest.mark.unit
    def test_satisfies_protocol(self, identity):
        assert isinstance(identity, IdentityGenerator)

    @pytest.mark.unit
    def test_concurrent_ids_are_unique(self, identity):
        """Ids drawn from many threads never collide."""
        results: list[int] = []

        def draw():
            for _ in range(200):
                results.append(identity.next_id())

        threads = [Thread(target=draw) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(results) == list(range(1600))


class TestModelIdentity:
    """Test ids assigned to models."""

    @pytest.mark.unit
    def test_ids_strictly_increase_across_subtypes(self):
        """The shared counter is used by every subtype."""
        models = [Note(), Task(), Note(), Model(), Task()]
        ids = [model.id for model in models]

        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)
        assert all(later - earlier == 1 for earlier, later in zip(ids, ids[1:]))

    @pytest.mark.unit
    def test_default_counter_advances_per_construction(self):
        before = default_identity.peek()

        Note()
        Note()

        assert default_identity.peek() == before + 2

    @pytest.mark.unit
    def test_injected_generator(self, identity):
        first = Note(identity=identity)
        second = Task(identity=identity)

        assert (first.id, second.id) == (0, 1)

    @pytest.mark.unit
    def test_ids_not_reused_after_discard(self, identity):
        first = Note(identity=identity)
        first_id = first.id
        del first

        assert Note(identity=identity).id == first_id + 1

    @pytest.mark.unit
    def test_id_is_read_only(self, identity):
        note = Note(identity=identity)

        with pytest.raises(AttributeError):
            note.id = 42

    @pytest.mark.unit
    def test_subtype_may_own_a_counter(self):
        class Ticket(Model):
            identity = CounterIdentity(start=1000)

        assert Ticket().id == 1000
        assert Ticket().id == 1001

    @pytest.mark.unit
    def test_id_consumed_even_if_subtype_init_fails(self, identity):
        class Broken(Model):
            def __init__(self, **kwargs):
                super().__init__(**kwargs)
                raise RuntimeError("subtype failure")

        with pytest.raises(RuntimeError):
            Broken(identity=identity)

        assert identity.peek() == 1
