from __future__ import annotations

"""
Leaf Rendering Policies.

Each policy decides how a grouping folder opens its Swift type and how a
single asset leaf is declared inside it. The traversal itself is shared
and lives in the tree renderer.
"""

from abc import ABC, abstractmethod

from assetgen.utils.naming import lowercase_first_letter


class LeafPolicy(ABC):
    """
    Abstract base class for asset-kind specific Swift emission.
    """

    @abstractmethod
    def open_block(self, type_name: str) -> str:
        """
        Return the opening line (without indentation) of a folder's type.

        Args:
            type_name: Already-lowercased Swift type name.
        """

    @abstractmethod
    def render_leaf(self, name: str) -> str:
        """
        Return the member declaration (without indentation) of one asset.

        Args:
            name: Bare asset name, suffix already stripped.
        """


class ImagesPolicy(LeafPolicy):
    """
    Folders become String-backed enums, assets become enum cases.
    """

    def open_block(self, type_name: str) -> str:
        return f"enum {type_name}: String {{"

    def render_leaf(self, name: str) -> str:
        return f"case {lowercase_first_letter(name)}"


class ColorsPolicy(LeafPolicy):
    """
    Folders become caseless enums used as namespaces, assets become
    computed static members built through the carrier's by-name initializer.
    """

    def __init__(self, carrier: str):
        """
        Args:
            carrier: Swift color type the members return (e.g. 'Color', 'UIColor').
        """
        self.carrier = carrier

    def open_block(self, type_name: str) -> str:
        return f"enum {type_name} {{"

    def render_leaf(self, name: str) -> str:
        # The catalog lookup needs the untouched asset name
        return (
            f"static var {lowercase_first_letter(name)}: {self.carrier} "
            f"{{ {self.carrier}(\"{name}\") }}"
        )
