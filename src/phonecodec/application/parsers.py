"""PhoneNumberParser implementations: strict international, national with hint, lenient."""

from phonecodec.domain import PhoneNumber


class DefaultPhoneNumberParser:
    """Parses E.164-style international numbers and rejects everything else."""

    def parse(self, text: str) -> PhoneNumber:
        return PhoneNumber.parse_optional(text)


class NationalPhoneNumberParser:
    """Parses international numbers, and national ones using a region hint."""

    def __init__(self, region: str) -> None:
        self.region = region

    def parse(self, text: str) -> PhoneNumber:
        return PhoneNumber.parse_national(text, self.region)


class LenientPhoneNumberParser:
    """Never rejects: unparseable text becomes an absent number that keeps its raw text."""

    def parse(self, text: str) -> PhoneNumber:
        return PhoneNumber.raw(text)


DEFAULT_PARSER = DefaultPhoneNumberParser()
