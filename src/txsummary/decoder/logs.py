"""Log Decoder — extract fungible and NFT transfers from receipt logs.

Each log is matched against the Transfer / TransferSingle / TransferBatch
signatures independently. ERC20 and ERC721 share the same Transfer topic and
are told apart only by topic count (3 vs 4).
"""

import logging
from collections.abc import Iterable

from txsummary.decoder.codec import (
    WORD_HEX,
    decode_uint_array,
    format_units,
    hex_to_int,
    is_empty_hex,
    split_words,
    topic_to_address,
)
from txsummary.decoder.types import LogRecord, NFTTransfer, Transfer
from txsummary.domain.enums import NFTStandard
from txsummary.registry import ReferenceRegistry, build_default_registry

logger = logging.getLogger(__name__)

# Event signature topics (keccak256 of the event signature)
TRANSFER_TOPIC = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"          # Transfer(address,address,uint256)
TRANSFER_SINGLE_TOPIC = "0xc3d58168c5ae7397731d063d5bbf3d657854427343f4c083240f7aacaa2d0f62"   # TransferSingle(address,address,address,uint256,uint256)
TRANSFER_BATCH_TOPIC = "0x4a39dc06d4c0dbc64b70af90fd698a233a518aa5d07e595d983b8c0526c8f7fb"    # TransferBatch(address,address,address,uint256[],uint256[])

ERC20_TOPIC_COUNT = 3     # sig + from + to, amount in data
ERC721_TOPIC_COUNT = 4    # sig + from + to + tokenId
ERC1155_TOPIC_COUNT = 4   # sig + operator + from + to

# TransferSingle payload: "0x" + id word + value word
MIN_TRANSFER_SINGLE_DATA = 2 + 2 * WORD_HEX


def extract_transfers(
    logs: Iterable[LogRecord],
    registry: ReferenceRegistry | None = None,
) -> tuple[list[Transfer], list[NFTTransfer]]:
    """Return (fungible transfers, NFT transfers) in log emission order. Malformed logs are skipped."""
    registry = registry or build_default_registry()
    transfers: list[Transfer] = []
    nft_transfers: list[NFTTransfer] = []

    for log in logs:
        if not log.topics:
            continue
        topic0 = log.topics[0].lower()
        n_topics = len(log.topics)

        try:
            if topic0 == TRANSFER_TOPIC and n_topics == ERC20_TOPIC_COUNT:
                if is_empty_hex(log.data):
                    continue
                transfers.append(_decode_erc20(log, registry))
            elif topic0 == TRANSFER_TOPIC and n_topics == ERC721_TOPIC_COUNT:
                nft_transfers.append(_decode_erc721(log, registry))
            elif topic0 == TRANSFER_SINGLE_TOPIC and n_topics == ERC1155_TOPIC_COUNT:
                if len(log.data) < MIN_TRANSFER_SINGLE_DATA:
                    continue
                nft = _decode_transfer_single(log, registry)
                if nft is not None:
                    nft_transfers.append(nft)
            elif topic0 == TRANSFER_BATCH_TOPIC and n_topics == ERC1155_TOPIC_COUNT:
                nft_transfers.extend(_decode_transfer_batch(log, registry))
        except ValueError as exc:
            logger.debug("Skipping malformed log from %s: %s", log.address, exc)

    return transfers, nft_transfers


def _decode_erc20(log: LogRecord, registry: ReferenceRegistry) -> Transfer:
    raw = hex_to_int(log.data)
    info = registry.token_info(log.address)
    return Transfer(
        token=log.address,
        symbol=info.symbol,
        name=info.name,
        from_address=topic_to_address(log.topics[1]),
        to_address=topic_to_address(log.topics[2]),
        amount=format_units(raw, info.decimals),
        raw_amount=raw,
        decimals=info.decimals,
    )


def _decode_erc721(log: LogRecord, registry: ReferenceRegistry) -> NFTTransfer:
    return NFTTransfer(
        contract=log.address,
        contract_name=registry.contract_name(log.address),
        token_id=str(hex_to_int(log.topics[3])),
        from_address=topic_to_address(log.topics[1]),
        to_address=topic_to_address(log.topics[2]),
        quantity=1,
        standard=NFTStandard.ERC721,
    )


def _decode_transfer_single(log: LogRecord, registry: ReferenceRegistry) -> NFTTransfer | None:
    token_id, quantity = split_words(log.data)[:2]
    if quantity == 0:
        return None
    return NFTTransfer(
        contract=log.address,
        contract_name=registry.contract_name(log.address),
        token_id=str(token_id),
        from_address=topic_to_address(log.topics[2]),
        to_address=topic_to_address(log.topics[3]),
        quantity=quantity,
        standard=NFTStandard.ERC1155,
    )


def _decode_transfer_batch(log: LogRecord, registry: ReferenceRegistry) -> list[NFTTransfer]:
    """TransferBatch data is (uint256[] ids, uint256[] values), both dynamic. Zero-value pairs are dropped."""
    words = split_words(log.data)
    if len(words) < 2:
        raise ValueError("TransferBatch payload too short")
    ids = decode_uint_array(words, words[0])
    values = decode_uint_array(words, words[1])
    if len(ids) != len(values):
        raise ValueError(f"TransferBatch ids/values length mismatch ({len(ids)} != {len(values)})")

    from_address = topic_to_address(log.topics[2])
    to_address = topic_to_address(log.topics[3])
    contract_name = registry.contract_name(log.address)
    return [
        NFTTransfer(
            contract=log.address,
            contract_name=contract_name,
            token_id=str(token_id),
            from_address=from_address,
            to_address=to_address,
            quantity=quantity,
            standard=NFTStandard.ERC1155,
        )
        for token_id, quantity in zip(ids, values)
        if quantity > 0
    ]
