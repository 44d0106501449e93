"""Presets for the tree metric pipeline."""

__all__ = ["MetricsPreset", "MetricsPresetDefault", "MetricsPresetDense"]

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, make_dataclass
import inspect
from typing import Any, List, Tuple

from treemetrics.pipeline import TreeMetricsPipeline


def create_default_preset() -> type:
    """
    Returns:
        Dataclass whose fields are the keyword arguments of :code:`TreeMetricsPipeline` with their default values.
    """

    constructor_signature = inspect.signature(TreeMetricsPipeline.__init__)
    fields: List[Tuple[str, Any, Any]] = []

    for name, param in constructor_signature.parameters.items():
        if name == "self":
            continue
        if param.default is not inspect.Parameter.empty:
            type_annotation = param.annotation if param.annotation is not inspect.Parameter.empty else Any
            fields.append((name, type_annotation, field(default=param.default)))  # pylint: disable=invalid-field-call

    return make_dataclass("MetricsPresetBase", fields=fields)


class MetricsPreset(create_default_preset(), Mapping):  # type: ignore[misc]
    """
    Preset for the tree metric pipeline containing the default settings of the pipeline. Presets can be unpacked
    into the constructor of the pipeline: :code:`TreeMetricsPipeline(**preset)`.
    """

    def __len__(self):
        """
        Returns:
            Number of parameters included in the preset.
        """

        return len(asdict(self))

    def __iter__(self):
        """
        Returns:
            Iterator over the parameter names.
        """

        return iter(asdict(self))

    def __getitem__(self, key: str) -> Any:
        """
        Args:
            key: Parameter name.

        Returns: Parameter value for the given parameter name.
        """

        return asdict(self)[key]


@dataclass
class MetricsPresetDefault(MetricsPreset):
    """
    Preset for the tree metric pipeline with the default settings, suited for skeletons reconstructed from typical
    terrestrial scans of single trees.
    """


@dataclass
class MetricsPresetDense(MetricsPreset):
    """
    Preset for the tree metric pipeline for dense skeletons with many leaf nodes. The leaf filter is stricter and more
    points are averaged to compute the tree height and the crown base height.
    """

    filter_percentage: float = 0.1
    top_n: int = 10
    bottom_n: int = 10
