"""Service methods returning localized statuses.

Shows the usual shapes of a service method built on StatusGenericLocalizer:
returning early on the first error, returning a result, and combining the
statuses of the methods it calls.

Run it to see the English (inline) messages and the French ones from an
in-memory resource:

    python examples/status_service.py
"""

from __future__ import annotations

from datetime import date, datetime

from babel.dates import format_date

from localizemessages import (
    DefaultLocalizer,
    DefaultLocalizerOptions,
    DictStringLocalizer,
    MessageLocalizer,
    StatusGenericLocalizer,
    StatusGenericLocalizerResult,
    camel_to_pascal,
    class_method_localize_key,
    fmt,
    method_localize_key,
)

# Culture of the messages written in this module
MESSAGE_CULTURE = "en-GB"


class DateService:
    """Validates inputs and builds a date, reporting problems as localized errors."""

    def __init__(self, localizer: MessageLocalizer, culture: str) -> None:
        self._localizer = localizer
        self._culture = culture

    def check_null(self, month: str | None) -> StatusGenericLocalizer:
        status = StatusGenericLocalizer(self._localizer, culture=self._culture)

        if month is None:
            # Naming the member lets a front end show the error next to the field
            return status.add_error_string(
                class_method_localize_key("NullParam", self, "check_null"),
                "The input must not be null.",
                camel_to_pascal("month"),
            )

        return status.set_message_string(
            method_localize_key("Success", self, "check_null"), "Successful completion."
        )

    def status_generic_with_result(self, year: int) -> StatusGenericLocalizerResult[str]:
        status: StatusGenericLocalizerResult[str] = StatusGenericLocalizerResult(
            self._localizer, culture=self._culture
        )

        if year < 0:
            return status.add_error_string(
                method_localize_key("NumberNegative", self, "status_generic_with_result"),
                "The property should not be negative.",
                camel_to_pascal("year"),
            )

        return status.set_result(str(year))

    def create_date(
        self, day: int, month: str | None, year: int
    ) -> StatusGenericLocalizerResult[date]:
        status: StatusGenericLocalizerResult[date] = StatusGenericLocalizerResult(
            self._localizer, culture=self._culture
        )

        # Errors of the called methods become errors of this status
        status.combine_statuses(self.check_null(month))
        if status.combine_statuses(self.status_generic_with_result(year)).has_errors:
            return status

        try:
            parsed = datetime.strptime(f"{month} {day} {year}", "%B %d %Y").date()
        except ValueError:
            return status.add_error_formatted(
                method_localize_key("BadDate", self, "create_date"),
                fmt(
                    "The day {0}, month {1}, year {2} doesn't turn into a valid date.",
                    day,
                    month,
                    year,
                ),
            )

        status.set_message_formatted(
            method_localize_key("Success", self, "create_date"),
            fmt("Successfully created the date {0}.", format_date(parsed, "long", locale="en_GB")),
        )
        return status.set_result(parsed)


FRENCH_RESOURCES = {
    "StatusGenericLocalizer_MessageHasOneError": "Échec avec 1 erreur",
    "StatusGenericLocalizer_MessageHasManyErrors": "Échec avec {0} erreurs",
    "check_null_Success": "Terminé avec succès.",
    f"{__name__}.DateService_check_null_NullParam": "La valeur ne doit pas être nulle.",
    "status_generic_with_result_NumberNegative": "La valeur ne doit pas être négative.",
    "create_date_BadDate": (
        "Le jour {0}, le mois {1} et l'année {2} ne forment pas une date valide."
    ),
    "create_date_Success": "Date {0} créée.",
}


def main() -> None:
    options = DefaultLocalizerOptions(MESSAGE_CULTURE)
    localizer = DefaultLocalizer(
        options,
        DictStringLocalizer(FRENCH_RESOURCES, raise_on_missing=False),
        resource_type="DateService",
    )

    for culture in ("en-GB", "fr-FR"):
        service = DateService(localizer, culture)
        print(f"--- {culture} ---")
        print(service.create_date(1, "april", 2000).message)
        print(service.create_date(1, None, 2000).get_all_errors())
        print(service.create_date(99, "april", 2000).get_all_errors())


if __name__ == "__main__":
    main()
