"""
Inspect phone numbers from the command line; prints one JSON object per number.
Run: python -m phonecodec +36301234567 "06 30 123 4567" --region HU
"""

import argparse
import dataclasses
import logging
import sys
from dataclasses import dataclass

from phonecodec.domain import JsonRecord, ParseFailure, ParseMode, PhoneNumber, optional_field
from phonecodec.infrastructure.config import configure_logging, load_settings
from phonecodec.pipeline import build_pipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhoneNumberReport(JsonRecord):
    phone_number: PhoneNumber = optional_field()
    present: bool = False
    e164: str | None = None
    readable: str | None = None
    region: str | None = None
    calling_code: int | None = None
    valid: bool | None = None
    display: str = ""
    error: str | None = None


def inspect_number(text: str, *, region: str | None = None, lenient: bool = False) -> PhoneNumberReport:
    try:
        if lenient:
            mode = ParseMode.LENIENT
        elif region:
            mode = ParseMode.NATIONAL
        else:
            mode = ParseMode.INTERNATIONAL
        phone_number = PhoneNumber.parse(text, mode, region)
    except ParseFailure as ex:
        logger.warning("Could not parse %r: %s", text, ex)
        return PhoneNumberReport(
            phone_number=PhoneNumber.raw(text),
            display=text,
            error=ex.kind.name,
        )
    number = phone_number.opt_get()
    if number is None:
        return PhoneNumberReport(phone_number=phone_number, display=phone_number.to_display_string())
    return PhoneNumberReport(
        phone_number=phone_number,
        present=True,
        e164=number.to_iso_string(),
        readable=number.to_readable_string(),
        region=number.iso_region or None,
        calling_code=number.calling_code,
        valid=number.is_valid_number(),
        display=phone_number.to_display_string(),
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="phonecodec", description=__doc__.strip().splitlines()[0])
    parser.add_argument("numbers", nargs="+", help="phone numbers to inspect")
    parser.add_argument("--region", help="2-character ISO region for national numbers (like US, HU)")
    parser.add_argument("--lenient", action="store_true", help="never fail; keep unparseable text as raw")
    parser.add_argument("--serialize-nulls", action="store_true", help="print null fields too")
    args = parser.parse_args(argv)

    settings = load_settings()
    if args.serialize_nulls:
        settings = dataclasses.replace(settings, serialize_nulls=True)
    configure_logging(settings)
    pipeline = build_pipeline(settings=settings, preload=[PhoneNumberReport])

    exit_code = 0
    for text in args.numbers:
        report = inspect_number(text, region=args.region, lenient=args.lenient)
        if report.error:
            exit_code = 1
        print(pipeline.to_json(report))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
