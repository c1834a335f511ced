"""
Global registry for parametric distribution families using singleton pattern.

Maps a :class:`~pysatl_stats.types.FamilyName` to the family class, so that
consumers holding only a family name (e.g. a test statistic's reference
distribution) can construct values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_stats.families.parametrizations import Parametrization


class ParametricFamilyRegister:
    """
    Singleton registry for parametric distribution families.

    Maintains a global registry of all parametric families, allowing
    them to be accessed by name.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _registered_families: dict[str, type[Parametrization]]

    def __new__(cls) -> ParametricFamilyRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_families = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> type[Parametrization]:
        """
        Retrieve a parametric family by name.

        Parameters
        ----------
        name : str
            Name of the family to retrieve.

        Returns
        -------
        type[Parametrization]
            The family class; call it with parameters to build a distribution.

        Raises
        ------
        ValueError
            If no family with the given name exists.
        """
        self = cls()
        if name not in self._registered_families:
            raise ValueError(f"No family {name} found in register")
        return self._registered_families[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        """Check whether a family is registered under ``name``."""
        return name in cls()._registered_families

    @classmethod
    def names(cls) -> list[str]:
        """Names of all registered families, in registration order."""
        return list(cls()._registered_families)

    @classmethod
    def register(cls, family: type[Parametrization]) -> None:
        """
        Register a new parametric family.

        Parameters
        ----------
        family : type[Parametrization]
            Family class decorated with
            :func:`~pysatl_stats.families.parametrizations.parametrization`.

        Raises
        ------
        ValueError
            If a family with the same name is already registered.
        """
        self = cls()
        name = family.__family_name__
        if name in self._registered_families:
            raise ValueError(f"Family {name} already found in register")
        self._registered_families[name] = family

    @classmethod
    def _reset(cls) -> None:
        """Drop the singleton instance (test helper)."""
        cls._instance = None
