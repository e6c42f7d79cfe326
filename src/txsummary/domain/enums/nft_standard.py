from enum import Enum


class NFTStandard(str, Enum):
    """Token standard of a non-fungible / semi-fungible transfer."""

    ERC721 = "ERC721"  # single-ownership
    ERC1155 = "ERC1155"  # semi-fungible
