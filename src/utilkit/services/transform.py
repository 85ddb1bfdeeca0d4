"""TransformService — string, array, object, and number helpers as ServiceResults."""

from __future__ import annotations

from typing import Any

from utilkit.core import arrays, numbers, objects, strings
from utilkit.services.base import BaseService
from utilkit.services.result import ServiceResult


class TransformService(BaseService):
    """Thin adapters over the core transformation helpers.

    String defaults (the truncation ellipsis) come from the ``[strings]``
    config section unless given explicitly.
    """

    # --- strings ---

    def truncate(self, text: Any, max_length: Any, ellipsis: str | None = None) -> ServiceResult:
        if ellipsis is None:
            ellipsis = self.config.strings.ellipsis
        return self._run("truncate", strings.truncate, text, max_length, ellipsis)

    def slugify(self, text: Any) -> ServiceResult:
        return self._run("slugify", strings.slugify, text)

    # --- arrays ---

    def chunk(self, array: Any, size: Any) -> ServiceResult:
        return self._run("chunk", arrays.chunk, array, size)

    def chunk_count(self, array: Any, size: Any) -> ServiceResult:
        return self._run("chunk_count", arrays.chunk_count, array, size)

    def chunk_at(self, array: Any, size: Any, index: Any) -> ServiceResult:
        return self._run("chunk_at", arrays.chunk_at, array, size, index)

    def unique(self, array: Any) -> ServiceResult:
        return self._run("unique", arrays.unique, array)

    def flatten(self, array: Any, depth: Any = None) -> ServiceResult:
        return self._run("flatten", arrays.flatten, array, depth)

    def difference(self, *array_list: Any) -> ServiceResult:
        return self._run("difference", arrays.difference, *array_list)

    def intersection(self, *array_list: Any) -> ServiceResult:
        return self._run("intersection", arrays.intersection, *array_list)

    def union(self, *array_list: Any) -> ServiceResult:
        return self._run("union", arrays.union, *array_list)

    # --- objects ---

    def pick(self, obj: Any, keys: Any) -> ServiceResult:
        return self._run("pick", objects.pick, obj, keys)

    def omit(self, obj: Any, keys: Any) -> ServiceResult:
        return self._run("omit", objects.omit, obj, keys)

    def merge(self, *sources: Any) -> ServiceResult:
        return self._run("merge", objects.merge, *sources)

    # --- numbers ---

    def clamp(self, value: Any, low: Any, high: Any) -> ServiceResult:
        return self._run("clamp", numbers.clamp, value, low, high)
