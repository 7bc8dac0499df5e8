import json
from dataclasses import dataclass
from pathlib import Path

from bst_implementation.src.bin_tree import BstNode, Key, build_tree


@dataclass
class InsertionScenario:
    name: str
    keys: list[Key]

    @property
    def root_id(self) -> Key:
        return self.keys[0]

    def build(self) -> BstNode:
        return build_tree(self.keys)


def get_insertion_scenarios(json_data_from_file: dict) -> list[InsertionScenario]:
    insertion_scenarios = []
    for scenario in json_data_from_file["scenarios"]:
        name = scenario["name"]
        keys = list(scenario["keys"])
        # first key is the root so a scenario can't be empty
        assert keys, f"Scenario {name} has no keys"
        insertion_scenarios.append(InsertionScenario(name=name, keys=keys))
    return insertion_scenarios


INSERTION_SCENARIO_FILE = "bst_scenarios.json"


def get_insertion_scenarios_from_config() -> list[InsertionScenario]:
    config_path = Path(__file__).parent / ".." / ".." / INSERTION_SCENARIO_FILE
    with open(config_path, "r") as file:
        json_data_from_file = json.load(file)
    return get_insertion_scenarios(json_data_from_file)
