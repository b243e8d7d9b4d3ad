from __future__ import annotations

"""
Swift Source Template.

Holds the fixed integration code emitted ahead of the generated
declarations and assembles the final file contents.
"""

from typing import List, Sequence, Tuple

from assetgen.domain.constants import IMAGES_STRUCT_NAME

HEADER = """import SwiftUI

// MARK: - Inits

extension UIImage {
    convenience init<T: RawRepresentable>(_ asset: T) where T.RawValue: StringProtocol {
        self.init(named: asset.rawValue as! String)!
    }
}

extension Image {
    init<T: RawRepresentable>(_ asset: T) where T.RawValue: StringProtocol {
        self.init(asset.rawValue as! String)
    }
}

extension UIColor {
    convenience init(_ name: String) {
        self.init(named: name)!
    }
}

// MARK: - Extensions
"""


def compose_source(
        images_code: str,
        colors_code: Sequence[Tuple[str, str]],
) -> str:
    """
    Assemble the complete Swift file.

    Args:
        images_code: Rendered images block.
        colors_code: (carrier, rendered colors block) pairs in output order.

    Returns:
        str: Final source text, newline-terminated.
    """
    sections: List[str] = [
        HEADER,
        f"struct {IMAGES_STRUCT_NAME} {{\n{images_code}\n}}\n",
    ]
    for carrier, code in colors_code:
        sections.append(f"extension {carrier} {{\n{code}\n}}\n")
    return "\n".join(sections)
