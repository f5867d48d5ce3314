"""Use case to create a period, optionally seeded from the template."""

from datetime import date

from src.application.errors import InvalidPeriodError
from src.application.ports.id_generator import IdGeneratorPort
from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.application.ports.template_repository import TemplateRepositoryPort
from src.domain.models import AccountingPeriod
from src.domain.services import apply_template, clamp_investment_percentage
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import coerce_date


class CreatePeriodUseCase:
    """Create and persist a new accounting period."""

    def __init__(
        self,
        periods_repository: PeriodsRepositoryPort,
        template_repository: TemplateRepositoryPort,
        id_generator: IdGeneratorPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            periods_repository: Port storing periods.
            template_repository: Port providing the default template.
            id_generator: Source of identifiers for the period and its items.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._periods_repository = periods_repository
        self._template_repository = template_repository
        self._id_generator = id_generator
        self._logger = logger or get_app_logger()

    def execute(
        self,
        name: str,
        start_date: date | str,
        end_date: date | str,
        investment_percentage=0,
        use_template: bool = True,
    ) -> AccountingPeriod:
        """Create the period and return it.

        Args:
            name: Display name of the period.
            start_date: First day of the period.
            end_date: Last day of the period (inclusive).
            investment_percentage: Share of income to set aside.
            use_template: Whether to copy template items into the period.

        Returns:
            AccountingPeriod: The stored period.

        Raises:
            InvalidPeriodError: If the name is empty or dates are reversed.
        """
        cleaned_name = name.strip()
        if not cleaned_name:
            raise InvalidPeriodError("Period name must not be empty")
        start = coerce_date(start_date)
        end = coerce_date(end_date)
        if start > end:
            raise InvalidPeriodError(
                f"Period start {start} is after its end {end}"
            )

        period = AccountingPeriod(
            id=self._id_generator.next(),
            name=cleaned_name,
            start_date=start,
            end_date=end,
            investment_percentage=clamp_investment_percentage(
                investment_percentage,
                self._logger,
            ),
        )
        if use_template:
            template = self._template_repository.load_template()
            period = apply_template(
                period,
                template,
                id_generator=self._id_generator,
            )

        self._periods_repository.save_period(period)
        self._logger.info(
            f"Created period {period.id} ({period.name}) with "
            f"{len(period.entries)} entries and "
            f"{len(period.fixed_expenses)} fixed expenses"
        )
        return period


__all__ = ["CreatePeriodUseCase"]
