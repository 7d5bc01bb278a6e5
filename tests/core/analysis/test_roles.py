"""
Tests for column role inference and default column selection.
"""

from csvviz.core.analysis.roles import (
    ColumnRole,
    classify_columns,
    default_columns,
    group_options,
)
from csvviz.core.domain.dataset import Dataset
from csvviz.core.utils.config import InferenceConfig


def _column(name, values):
    return Dataset.from_records([{name: value} for value in values])


class TestClassifyColumns:
    """Tests for classify_columns."""

    def test_empty_dataset_has_no_roles(self, empty_dataset):
        roles = classify_columns(empty_dataset)

        assert list(roles) == ["category", "amount"]
        assert roles.roles_for("category") == frozenset()
        assert roles.roles_for("amount") == frozenset()

    def test_numeric_threshold(self):
        four_of_five = classify_columns(_column("v", ["1", "2", "3", "4", "x"]))
        three_of_five = classify_columns(_column("v", ["1", "2", "3", "x", "y"]))

        assert four_of_five.has_role("v", ColumnRole.NUMERIC)
        assert not three_of_five.has_role("v", ColumnRole.NUMERIC)

    def test_non_numeric_column_is_categorical(self):
        roles = classify_columns(_column("v", ["a", "b", "c", "d", "e"]))

        assert roles.has_role("v", ColumnRole.CATEGORICAL)

    def test_low_cardinality_numeric_is_also_categorical(self):
        roles = classify_columns(_column("v", ["1"] * 10))

        assert roles.roles_for("v") >= {ColumnRole.NUMERIC, ColumnRole.CATEGORICAL}

    def test_high_cardinality_numeric_is_not_categorical(self):
        roles = classify_columns(_column("v", [str(i) for i in range(10)]))

        assert not roles.has_role("v", ColumnRole.CATEGORICAL)

    def test_sequential_by_name_hint(self):
        roles = classify_columns(_column("Order Date", ["x"]))

        assert roles.has_role("Order Date", ColumnRole.SEQUENTIAL)

    def test_sequential_by_distinct_count(self):
        values = [str(i % 5) for i in range(10)]
        roles = classify_columns(_column("v", values))

        assert roles.has_role("v", ColumnRole.SEQUENTIAL)

    def test_too_few_distinct_values_is_not_sequential(self):
        roles = classify_columns(_column("v", ["1", "2", "3", "1", "2", "3"]))

        assert not roles.has_role("v", ColumnRole.SEQUENTIAL)

    def test_region_column_is_geographic_and_categorical(self):
        roles = classify_columns(
            _column("region", ["North", "South", "North", "East", "West"])
        )

        assert roles.roles_for("region") >= {
            ColumnRole.GEOGRAPHIC_KEY,
            ColumnRole.CATEGORICAL,
        }

    def test_geographic_by_name_ignores_cardinality(self):
        roles = classify_columns(_column("Country Code", ["US"] * 3))

        assert roles.has_role("Country Code", ColumnRole.GEOGRAPHIC_KEY)

    def test_geographic_by_distinct_count_bounds(self):
        one_value = classify_columns(_column("v", ["a", "a", "a"]))
        many_values = classify_columns(_column("v", [f"k{i}" for i in range(101)]))
        some_values = classify_columns(_column("v", ["a", "b", "a"]))

        assert not one_value.has_role("v", ColumnRole.GEOGRAPHIC_KEY)
        assert not many_values.has_role("v", ColumnRole.GEOGRAPHIC_KEY)
        assert some_values.has_role("v", ColumnRole.GEOGRAPHIC_KEY)

    def test_row_order_does_not_change_roles(self, sales_records):
        forward = classify_columns(Dataset.from_records(sales_records))
        backward = classify_columns(Dataset.from_records(list(reversed(sales_records))))

        for column in forward:
            assert forward.roles_for(column) == backward.roles_for(column)

    def test_oversized_radix_cell_is_not_numeric(self):
        dataset = Dataset.from_records([{"a": "0x" + "f" * 300, "b": "1"}])

        roles = classify_columns(dataset)

        assert not roles.has_role("a", ColumnRole.NUMERIC)
        assert roles.has_role("a", ColumnRole.CATEGORICAL)
        assert roles.has_role("b", ColumnRole.NUMERIC)

    def test_custom_thresholds(self):
        dataset = _column("v", ["1", "2", "x", "y"])
        roles = classify_columns(dataset, InferenceConfig(numeric_ratio=0.5))

        assert roles.has_role("v", ColumnRole.NUMERIC)

    def test_profiles_and_to_dict(self, sales_dataset):
        roles = classify_columns(sales_dataset)

        profile = roles.profiles["amount"]
        assert profile.numeric_count == 4
        assert profile.distinct_count == 5
        assert profile.numeric_fraction == 0.8
        assert "numeric" in roles.to_dict()["amount"]["roles"]

    def test_columns_with_keeps_dataset_order(self, sales_dataset):
        roles = classify_columns(sales_dataset)

        assert roles.columns_with(ColumnRole.CATEGORICAL) == ["date", "region", "product"]
        assert roles.first(ColumnRole.NUMERIC) == "amount"


class TestDefaultColumns:
    """Tests for default_columns."""

    def test_picks_role_columns(self):
        dataset = Dataset.from_records(
            [
                {"state": "CA", "month": "Jan", "sales": "10"},
                {"state": "NY", "month": "Feb", "sales": "20"},
                {"state": "CA", "month": "Mar", "sales": "30"},
                {"state": "NY", "month": "Apr", "sales": "40"},
                {"state": "TX", "month": "May", "sales": "50"},
            ]
        )

        defaults = default_columns(dataset)

        assert defaults.category == "state"
        assert defaults.sequence == "month"
        assert defaults.measure == "sales"
        assert defaults.group == "state"

    def test_measure_falls_back_to_second_column(self):
        dataset = Dataset.from_records([{"name": "a", "city": "x"}])

        assert default_columns(dataset).measure == "city"

    def test_single_column_uses_first_column_everywhere(self):
        dataset = Dataset.from_records([{"name": "a"}, {"name": "a"}])

        defaults = default_columns(dataset)

        assert defaults.category == "name"
        assert defaults.measure == "name"

    def test_no_geographic_column_means_no_group(self):
        dataset = Dataset.from_records([{"x": str(i), "y": str(i)} for i in range(200)])

        assert default_columns(dataset).group is None

    def test_no_columns(self):
        defaults = default_columns(Dataset())

        assert defaults.category is None
        assert defaults.measure is None


def test_group_options_sorted_with_unknown(sales_dataset) -> None:
    dataset = Dataset.from_records(
        [{"region": "South"}, {"region": ""}, {"region": "North"}, {"region": None}]
    )

    assert group_options(dataset, "region") == ["North", "South", "Unknown"]
    assert group_options(sales_dataset, None) == []
    assert group_options(sales_dataset, "missing") == []
