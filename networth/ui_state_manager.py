"""Calculator state manager for NetWorth Projector.

This module owns the calculator's session state and is the only place it
changes. Each field has one canonical value; its slider position and display
text are derived from that value on demand, so the three never drift apart.

Every change goes through :meth:`CalculatorStateManager.apply` with an
:class:`InputSource` tag saying which representation produced it:

    TEXT    typed text    -> parse, clamp, snap    -> canonical value
    SLIDER  position 0..1 -> map, round/snap       -> canonical value
    VALUE   number        -> clamp                 -> canonical value

Slider position and text are then re-derived from the canonical value. A
derivation never feeds back into ``apply``.
"""
from typing import Callable, Dict, Optional

from networth.config import (
    DEFAULT_PRINCIPAL,
    DEFAULT_GROWTH_RATE,
    DEFAULT_YEARS,
    DEFAULT_MONTHS,
    DEFAULT_COMPOUNDING,
    DEFAULT_CURRENCY,
    DEFAULT_EXCHANGE_RATE,
    DURATION_UNIT,
    GROWTH_CURVE,
    OUTPUT_PLACEHOLDER,
)
from networth.data_structures import (
    CalculationOutput,
    CompoundingMode,
    CurrencyCode,
    DurationUnit,
    Field,
    InputSource,
)
from networth.engine import future_value, projection_schedule, to_years
from networth.exceptions import InvalidInputError
from networth.result import Result, ErrorType
from networth.services.currency_presenter import convert_currency, format_amount
from networth.services.input_fields import DurationField, GrowthRateField, PrincipalField


class CalculatorStateManager:
    """Single source of truth for the calculator form.

    Attributes:
        rate_service: Optional ExchangeRateService supplying the persisted rate.
        on_change: Callback invoked with the manager after every state change.
    """

    def __init__(self, rate_service=None, duration_unit: DurationUnit = None,
                 growth_curve: str = GROWTH_CURVE,
                 on_change: Callable[['CalculatorStateManager'], None] = None):
        """Initialize CalculatorStateManager.

        Args:
            rate_service: ExchangeRateService; without one the default rate is used.
            duration_unit: Years or months; defaults to DURATION_UNIT.
            growth_curve: "bezier" or "linear" growth slider.
            on_change: Optional callback invoked when state changes.
        """
        self.rate_service = rate_service
        self.on_change = on_change

        self._currency = CurrencyCode(DEFAULT_CURRENCY)
        self._display_currency = self._currency
        self._holding = False
        self._compounding = CompoundingMode(DEFAULT_COMPOUNDING)

        unit = duration_unit or DurationUnit(DURATION_UNIT)
        self._fields = {
            Field.PRINCIPAL: PrincipalField(self._currency),
            Field.GROWTH_RATE: GrowthRateField(growth_curve),
            Field.DURATION: DurationField(unit),
        }
        self._values: Dict[Field, float] = {}
        self._drafts: Dict[Field, str] = {}
        self._output: Optional[CalculationOutput] = None
        self._error_text: Optional[str] = None

        self._load_defaults()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def currency(self) -> CurrencyCode:
        """Currency the principal is entered in."""
        return self._currency

    @property
    def display_currency(self) -> CurrencyCode:
        """Currency the result is shown in; differs from ``currency`` while holding."""
        return self._display_currency

    @property
    def opposite_currency(self) -> CurrencyCode:
        return self._currency.opposite

    @property
    def is_holding(self) -> bool:
        return self._holding

    @property
    def compounding(self) -> CompoundingMode:
        return self._compounding

    @property
    def duration_unit(self) -> DurationUnit:
        return self._fields[Field.DURATION].unit

    @property
    def error_text(self) -> Optional[str]:
        return self._error_text

    @property
    def output(self) -> Optional[CalculationOutput]:
        return self._output

    @property
    def exchange_rate(self) -> float:
        """INR per 1 USD, read fresh so settings edits apply immediately."""
        if self.rate_service is not None:
            return self.rate_service.get_rate()
        return DEFAULT_EXCHANGE_RATE

    def field(self, field: Field):
        """The InputField rules for ``field``."""
        return self._fields[field]

    def value(self, field: Field) -> float:
        """Canonical value of ``field``."""
        return self._values[field]

    def slider_position(self, field: Field) -> float:
        """Slider position derived from the canonical value."""
        return self._fields[field].to_slider(self._values[field])

    def display_text(self, field: Field) -> str:
        """Text mirror: the uncommitted draft if any, else the formatted value."""
        if field in self._drafts:
            return self._drafts[field]
        return self._fields[field].format(self._values[field])

    def has_draft(self, field: Field) -> bool:
        return field in self._drafts

    def duration_caption(self) -> str:
        return self._fields[Field.DURATION].caption(self._values[Field.DURATION])

    def output_text(self) -> str:
        """Result line, or the placeholder line before a valid calculation."""
        if self._output is not None:
            return self._output.text
        return self._result_line(OUTPUT_PLACEHOLDER)

    # ------------------------------------------------------------------
    # Reducer
    # ------------------------------------------------------------------

    def apply(self, field: Field, source: InputSource, value) -> Result:
        """Apply one input event to ``field``.

        Args:
            field: Field being changed.
            source: Which representation produced ``value``.
            value: Text for TEXT, a [0, 1] position for SLIDER, a number for VALUE.

        Returns:
            Result carrying the new canonical value, or a VALIDATION failure
            when typed text is rejected. A failure leaves the canonical value
            untouched and drops the draft so the text reverts.
        """
        rules = self._fields[field]

        if source == InputSource.TEXT:
            try:
                canonical = rules.parse(value)
            except InvalidInputError as e:
                self._drafts.pop(field, None)
                if field == Field.PRINCIPAL:
                    self._error_text = e.message
                self._notify()
                return Result.fail(e.message, ErrorType.VALIDATION)
            if field == Field.PRINCIPAL:
                self._error_text = None
        elif source == InputSource.SLIDER:
            canonical = rules.from_slider(float(value))
        else:
            canonical = rules.clamp(float(value))

        self._drafts.pop(field, None)
        self._values[field] = canonical
        self._notify()
        return Result.ok(canonical)

    def edit_text(self, field: Field, text: str) -> None:
        """Record text being typed; nothing is parsed until commit."""
        self._drafts[field] = text

    def commit(self, field: Field) -> Result:
        """Commit the pending draft of ``field``, if there is one."""
        if field not in self._drafts:
            return Result.ok(self._values[field])
        return self.apply(field, InputSource.TEXT, self._drafts[field])

    def commit_all(self) -> Result:
        """Commit every pending draft; fails if the principal draft is invalid."""
        outcome = Result.ok()
        for field in (Field.PRINCIPAL, Field.GROWTH_RATE, Field.DURATION):
            result = self.commit(field)
            if not result and field == Field.PRINCIPAL:
                outcome = result
        return outcome

    def set_currency(self, currency: CurrencyCode) -> None:
        """Switch the input currency.

        The principal keeps its number, clamped to the new currency's bound,
        and its slider is re-derived on the new curve. While a hold gesture
        is active the display currency is left alone.
        """
        self._currency = currency
        principal = PrincipalField(currency)
        self._fields[Field.PRINCIPAL] = principal
        self._values[Field.PRINCIPAL] = principal.clamp(self._values[Field.PRINCIPAL])
        self._drafts.pop(Field.PRINCIPAL, None)
        if not self._holding:
            self._display_currency = currency
            self.calculate()
        else:
            self._notify()

    def set_compounding(self, mode: CompoundingMode) -> None:
        self._compounding = mode
        if self._output is not None:
            self.calculate()
        else:
            self._notify()

    # ------------------------------------------------------------------
    # Calculation
    # ------------------------------------------------------------------

    def calculate(self) -> Result:
        """Commit pending text and compute the future value.

        Returns:
            Result with a CalculationOutput, or a VALIDATION failure carrying
            the invalid-principal message.
        """
        self._error_text = None
        committed = self.commit_all()
        if not committed:
            self._error_text = committed.error
            self._output = None
            self._notify()
            return committed

        principal = self._values[Field.PRINCIPAL]
        years = to_years(self._values[Field.DURATION], self.duration_unit)
        try:
            value = future_value(principal, self._values[Field.GROWTH_RATE], years, self._compounding)
        except InvalidInputError as e:
            self._error_text = e.message
            self._output = None
            self._notify()
            return Result.fail(e.message, ErrorType.VALIDATION)

        display_value = convert_currency(value, self._currency, self._display_currency, self.exchange_rate)
        text = self._result_line(format_amount(display_value, self._display_currency, decimals=2))
        self._output = CalculationOutput(
            future_value=value,
            display_value=display_value,
            display_currency=self._display_currency,
            text=text,
        )
        self._notify()
        return Result.ok(self._output)

    def growth_schedule(self):
        """Year-by-year balances for the current inputs, in the display currency."""
        years = to_years(self._values[Field.DURATION], self.duration_unit)
        df = projection_schedule(self._values[Field.PRINCIPAL], self._values[Field.GROWTH_RATE],
                                 years, self._compounding)
        factor = convert_currency(1.0, self._currency, self._display_currency, self.exchange_rate)
        df['balance'] = df['balance'] * factor
        df['growth'] = df['growth'] * factor
        return df

    # ------------------------------------------------------------------
    # Hold-to-convert gesture
    # ------------------------------------------------------------------

    def begin_hold(self) -> None:
        """Show the result in the opposite currency until :meth:`end_hold`."""
        if self._holding:
            return
        self._holding = True
        self._display_currency = self.opposite_currency
        self.calculate()

    def end_hold(self) -> None:
        self._holding = False
        self._display_currency = self._currency
        self.calculate()

    # ------------------------------------------------------------------
    # Defaults
    # ------------------------------------------------------------------

    def reset_defaults(self) -> Result:
        """Restore default inputs and recalculate."""
        self._load_defaults()
        return self.calculate()

    def _load_defaults(self) -> None:
        duration = DEFAULT_MONTHS if self.duration_unit == DurationUnit.MONTHS else DEFAULT_YEARS
        self._values[Field.PRINCIPAL] = self._fields[Field.PRINCIPAL].clamp(DEFAULT_PRINCIPAL)
        self._values[Field.GROWTH_RATE] = self._fields[Field.GROWTH_RATE].clamp(DEFAULT_GROWTH_RATE)
        self._values[Field.DURATION] = self._fields[Field.DURATION].clamp(float(duration))
        self._drafts.clear()
        self._compounding = CompoundingMode(DEFAULT_COMPOUNDING)
        self._display_currency = self._currency
        self._holding = False
        self._output = None
        self._error_text = None

    def _result_line(self, amount_text: str) -> str:
        rules = self._fields[Field.DURATION]
        duration_text = rules.format(self._values[Field.DURATION])
        return f"Net worth after {duration_text} {rules.unit_label()} is: {amount_text}"

    def _notify(self) -> None:
        if self.on_change:
            self.on_change(self)
