"""Tests for join, comma_join and estimate_capacity."""

from collections import deque
from datetime import date

import pytest

from stringseq import BufferPool, comma_join, estimate_capacity, join
from stringseq.config import JoinConfig, join_config_context
from stringseq.errors import InvalidArgumentError


class TestCommaJoin:
    """comma_join on the common inputs."""

    def test_with_space(self) -> None:
        assert comma_join(["one", "two", "three"], include_space=True) == "one, two, three"

    def test_without_space(self) -> None:
        assert comma_join(["one", "two", "three"], include_space=False) == "one,two,three"

    def test_default_has_no_space(self) -> None:
        assert comma_join(["a", "b"]) == "a,b"

    def test_none_sequence(self) -> None:
        assert comma_join(None) == ""

    def test_empty_list(self) -> None:
        assert comma_join([]) == ""

    def test_single_element(self) -> None:
        assert comma_join(["only"], include_space=True) == "only"

    def test_integers(self) -> None:
        assert comma_join([1, 2, 3]) == "1,2,3"


class TestJoin:
    """join over the different input shapes."""

    def test_empty_generator(self) -> None:
        assert join((x for x in []), ";") == ""

    def test_generator(self) -> None:
        assert join((str(i) for i in range(3)), ";") == "0;1;2"

    def test_set_of_one(self) -> None:
        assert join({"x"}, "|") == "x"

    def test_deque(self) -> None:
        assert join(deque(["a", "b"]), "-", include_space=True) == "a- b"

    def test_none_elements_are_empty_text(self) -> None:
        assert join(["a", None, "b"], ",") == "a,,b"

    def test_all_none(self) -> None:
        assert join([None, None], ",") == ","

    def test_mixed_types(self) -> None:
        assert join(["a", 1, 2.5, date(2024, 1, 2), None], ";") == "a;1;2.5;2024-01-02;"

    def test_mixed_types_with_space(self) -> None:
        assert join([1, "b", True], ",", include_space=True) == "1, b, True"

    def test_empty_strings_keep_separators(self) -> None:
        assert join(["", "", ""], ",") == ",,"

    def test_string_is_iterated_per_character(self) -> None:
        assert join("abc", ",") == "a,b,c"

    def test_dict_joins_keys(self) -> None:
        assert join({"a": 1, "b": 2}, ",") == "a,b"

    def test_fast_path_matches_general_path(self) -> None:
        values = ["alpha", "beta", "gamma"]
        assert join(values, ",") == join(iter(values), ",")
        assert join(tuple(values), ",") == join(iter(values), ",")

    def test_include_space_on_list_of_str(self) -> None:
        assert join(["x", "y"], ";", include_space=True) == "x; y"

    def test_large_input_grows_buffer(self) -> None:
        values = [f"item-{i}" for i in range(5000)]
        result = join(iter(values), ",")
        assert result.split(",") == values

    def test_none_sequence_ignores_bad_separator(self) -> None:
        assert join(None, "too long") == ""


class TestJoinSeparator:
    """Separator validation."""

    def test_multi_character_separator_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            join(["a"], ", ")
        assert exc_info.value.param_name == "separator"

    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            join(["a"], "")

    def test_non_string_separator_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            join(["a"], 44)  # type: ignore[arg-type]


class TestJoinPool:
    """join rents and releases buffers."""

    def test_uses_given_pool(self) -> None:
        pool = BufferPool()
        join(iter(["a", "b"]), ",", pool=pool)
        stats = pool.stats()
        assert stats["rented"] == 1
        assert stats["available"] == 1

    def test_reuses_released_buffer(self) -> None:
        pool = BufferPool()
        join(iter(["a"]), ",", pool=pool)
        join(iter(["b"]), ",", pool=pool)
        assert pool.stats()["reused"] == 1

    def test_empty_iterator_releases_buffer(self) -> None:
        pool = BufferPool()
        assert join(iter([]), ",", pool=pool) == ""
        assert pool.available == 1

    def test_empty_sized_rents_nothing(self) -> None:
        pool = BufferPool()
        join([], ",", pool=pool)
        assert pool.stats()["rented"] == 0

    def test_fast_path_rents_nothing(self) -> None:
        pool = BufferPool()
        join(["a", "b"], ",", pool=pool)
        assert pool.stats()["rented"] == 0


class TestEstimateCapacity:
    """Initial buffer sizing."""

    def test_unsized_uses_default(self) -> None:
        assert estimate_capacity(iter(range(1000))) == 128

    def test_small_sized_clamped_to_default(self) -> None:
        assert estimate_capacity([1, 2, 3]) == 128

    def test_proportional(self) -> None:
        assert estimate_capacity(range(100)) == 400

    def test_clamped_to_max(self) -> None:
        assert estimate_capacity(range(100_000)) == 4096

    def test_explicit_config(self) -> None:
        config = JoinConfig(default_capacity=8, max_initial_capacity=64, capacity_per_element=2)
        assert estimate_capacity(range(10), config) == 20
        assert estimate_capacity(range(1000), config) == 64
        assert estimate_capacity(iter([]), config) == 8

    def test_reads_context_config(self) -> None:
        with join_config_context(JoinConfig(default_capacity=32)):
            assert estimate_capacity(iter([])) == 32
