"""
Longcode assembler.

Builds the ordered token tuple describing a contract in natural language.
Token order is the placeholder order of the phrase template:

    1. phrase template        lower(bet_type) + "_" + expiry_type
    2. underlying display name
    3. when the contract starts
    4. when the contract ends
    5. barrier(s)
    6. multiplier, currency           (multiplier contracts, lookbacks)
    7. amount, currency               (*SPREAD)
    8. selected tick                  (*TICK*)
    9. reset point                    (*RESET*)
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Union

from config.constants import (
    DIGIT_PREFIX,
    EXPIRY_TYPES,
    RESET_MARKER,
    SPREAD_SUFFIX,
    TICK_MARKER,
    TOKEN_ISSUANCE_TYPE,
)
from config.logging_config import LogCategory
from core.domain.entities import ContractParameters, Instrument
from core.errors import IncompleteContractError
from core.interfaces import IInstrumentRegistry
from longcode.barriers import barrier_display
from longcode.catalog import TemplateCatalog
from longcode.durations import contract_span_seconds, resolve_expiry_type
from longcode.tokens import (
    DurationValue,
    Group,
    Longcode,
    NumericValue,
    Text,
    Token,
    UnderlyingName,
)

logger = logging.getLogger(__name__)


def _utc(epoch: int) -> datetime:
    try:
        return datetime.fromtimestamp(epoch, timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        msg = f"Invalid shortcode. Timestamp {epoch} is out of range"
        logger.error(f"{LogCategory.LONGCODE} {msg}")
        raise IncompleteContractError(msg) from e


def _gmt_datetime(epoch: int) -> str:
    return _utc(epoch).strftime("%Y-%m-%d %H:%M:%S") + " GMT"


def _gmt_date(epoch: int) -> str:
    return _utc(epoch).strftime("%Y-%m-%d")


def _plain_number(value: float) -> Union[int, float]:
    return int(value) if float(value).is_integer() else value


def reset_point(params: ContractParameters) -> DurationValue:
    """
    Halfway point of the contract, where reset contracts may move the barrier.

    Half the tick count for tick contracts; otherwise the span rounded to an
    even number of seconds, then halved.
    """
    if params.is_tick_expiry:
        return DurationValue(params.duration.value // 2, "ticks")

    seconds = contract_span_seconds(params) or 0
    even_seconds = int(seconds / 2 + 0.5) * 2
    return DurationValue(even_seconds // 2, "seconds")


class LongcodeAssembler:
    """
    Renders ContractParameters into longcode tokens.

    Holds read-only references to the instrument registry and the template
    catalog; assembling never mutates either, so calls are independent.
    """

    def __init__(self, instruments: IInstrumentRegistry, catalog: TemplateCatalog):
        self.instruments = instruments
        self.catalog = catalog

    def assemble(self, params: ContractParameters, currency: Optional[str] = None) -> Longcode:
        """
        Longcode tokens for a decoded contract.

        Args:
            params: Parser output or caller-built parameters
            currency: Currency for multiplier/spread tokens (defaults to params.currency)

        Returns:
            Ordered token tuple; ``(legacy_contract,)`` for the Invalid sentinel

        Raises:
            IncompleteContractError: If a recognized contract has no expiry, or a
                timestamp that cannot be shown as a date
            MissingTemplateError: If the catalog has no template for the contract
            UnrecognizedBarrierError: If a barrier cannot be displayed
            UnknownUnderlyingError: If the registry does not know the underlying
        """
        if params.is_invalid:
            return (Text(self.catalog.template("legacy_contract")),)

        currency = currency or params.currency
        if params.bet_type == TOKEN_ISSUANCE_TYPE:
            return self._token_issuance(params, currency)

        if not params.has_expiry:
            msg = f"Invalid shortcode. No expiry is specified. ({params.shortcode or params.bet_type})"
            logger.error(f"{LogCategory.LONGCODE} {msg}")
            raise IncompleteContractError(msg)

        instrument = self.instruments.by_symbol(params.underlying_symbol)
        expiry_type = resolve_expiry_type(params)
        key = f"{params.bet_type}_{expiry_type.value}".lower()
        logger.debug(f"{LogCategory.LONGCODE} Using template {key}")

        tokens: list[Token] = [
            Text(self.catalog.template(key)),
            UnderlyingName(instrument.display_name),
        ]
        tokens.extend(self._when_start_end(params, expiry_type))
        tokens.extend(self._barrier_tokens(params, instrument))

        bet_type = params.bet_type
        if params.multiplier is not None and currency:
            tokens.append(NumericValue(_plain_number(params.multiplier)))
            tokens.append(NumericValue(currency))

        if bet_type.endswith(SPREAD_SUFFIX):
            amount = _plain_number(params.amount) if params.amount is not None else 0
            tokens.append(NumericValue(amount))
            tokens.append(NumericValue(currency or ""))

        if TICK_MARKER in bet_type and params.selected_tick is not None:
            tokens.append(NumericValue(params.selected_tick))

        if RESET_MARKER in bet_type:
            tokens.append(reset_point(params))

        return tuple(tokens)

    def _when_start_end(
        self, params: ContractParameters, expiry_type: EXPIRY_TYPES
    ) -> tuple[Token, Token]:
        if expiry_type == EXPIRY_TYPES.TICK:
            return (
                Group((Text(self.catalog.template("first_tick")),)),
                Group((NumericValue(params.duration.value),)),
            )

        date_start = params.date_start or 0
        span = contract_span_seconds(params) or 0
        date_expiry = date_start + span

        if expiry_type == EXPIRY_TYPES.INTRADAY_FIXED_EXPIRY:
            return Group(), Group((Text(_gmt_datetime(date_expiry)),))

        if expiry_type == EXPIRY_TYPES.DAILY:
            return Group(), Group((Text(self.catalog.template("close_on")), Text(_gmt_date(date_expiry))))

        if params.starts_as_forward_starting:
            when_start = Group((Text(_gmt_datetime(date_start)),))
        else:
            when_start = Group((Text(self.catalog.template("contract_start_time")),))
        return when_start, DurationValue(span, "seconds")

    def _barrier_tokens(self, params: ContractParameters, instrument: Instrument) -> list[Token]:
        if DIGIT_PREFIX in params.bet_type:
            # Digit predictions are shown as given
            if params.barrier is None:
                return [Group()]
            return [NumericValue(params.barrier)]

        if params.has_barrier_pair:
            return [
                barrier_display(params.high_barrier, instrument, self.catalog),
                barrier_display(params.low_barrier, instrument, self.catalog),
            ]

        if params.barrier is not None:
            return [barrier_display(params.barrier, instrument, self.catalog)]

        return [Group((NumericValue(instrument.pip_size),))]

    def _token_issuance(self, params: ContractParameters, currency: Optional[str]) -> Longcode:
        price = params.per_token_bid_price if params.per_token_bid_price is not None else params.amount
        return (
            Text(self.catalog.template("binaryico")),
            NumericValue(params.number_of_tokens or 0),
            NumericValue(_plain_number(price or 0)),
            NumericValue(currency or ""),
        )
