import json
import random

import pytest

from luck.errors import InvalidArgumentError
from luck.tables import WeightedTable
from luck.types import WeightedItem


def test_weighted_sample_returns_values():
    table = WeightedTable(
        [WeightedItem(value="never", weight=0), WeightedItem(value="always", weight=2)]
    )

    assert table.weighted_sample(random.Random(1)) == "always"
    assert table.total_weight == 2
    assert len(table) == 2


def test_uniform_sample_ignores_weights():
    table = WeightedTable(
        [WeightedItem(value="a", weight=0), WeightedItem(value="b", weight=100)]
    )
    generator = random.Random(13)

    assert {table.sample(generator) for _ in range(200)} == {"a", "b"}


def test_empty_table_returns_none():
    table = WeightedTable()

    assert table.sample() is None
    assert table.weighted_sample() is None


def test_from_json_file_skips_invalid_entries(tmp_path):
    path = tmp_path / "loot.json"
    path.write_text(
        json.dumps(
            {
                "items": [
                    {"value": "sword", "weight": 1.5},
                    {"value": "shield", "weight": -1},
                    {"value": "potion"},
                ]
            }
        ),
        encoding="utf-8",
    )

    table = WeightedTable.from_file(path)

    assert [item.value for item in table] == ["sword", "potion"]
    assert table.all()[1].weight == 1.0


def test_from_file_without_items_raises(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(InvalidArgumentError):
        WeightedTable.from_file(path)


def test_from_yaml_file(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "loot.yaml"
    path.write_text("- value: gem\n  weight: 3\n- value: coin\n  weight: 1\n", encoding="utf-8")

    table = WeightedTable.from_file(path)

    assert [item.value for item in table] == ["gem", "coin"]
    assert table.total_weight == 4


@pytest.mark.parametrize("content", ["5", "null", '"loot"', '{"items": {"value": "gem"}}'])
def test_from_file_rejects_non_list_payloads(tmp_path, content):
    path = tmp_path / "broken.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(InvalidArgumentError) as excinfo:
        WeightedTable.from_file(path)

    assert excinfo.value.parameter == "path"


def test_from_yaml_scalar_is_rejected(tmp_path):
    pytest.importorskip("yaml")
    path = tmp_path / "broken.yaml"
    path.write_text("just a string\n", encoding="utf-8")

    with pytest.raises(InvalidArgumentError):
        WeightedTable.from_file(path)
