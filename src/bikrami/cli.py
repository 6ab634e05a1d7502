from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import json
import logging
import re
import sys
from typing import Tuple


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _split_ymd(s: str) -> Tuple[int, int, int]:
    y, m, d = map(int, s.split("-"))
    return y, m, d


def _parse_ymd(s: str) -> date:
    return date(*_split_ymd(s))


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_record(rec) -> None:
    lunar, solar = rec.lunar, rec.solar
    en_l, pa_l = lunar.english_date(), lunar.punjabi_date()
    en_s, pa_s = solar.english_date(), solar.punjabi_date()
    print(f"Gregorian date : {rec.gregorian_date.isoformat()} ({en_s['day']})")
    if rec.julian_date is not None:
        jd = rec.julian_date
        print(f"Julian date    : {jd.date} {jd.month_name} {jd.year}")
    mal = " (Mal Maas)" if lunar.mal_maas else ""
    print(f"Lunar date     : {en_l['monthName']} {en_l['paksh']} {en_l['tithi']}, {en_l['year']}{mal}")
    print(f"                 {pa_l['monthName']} {pa_l['paksh']} {pa_l['tithi']}, {pa_l['year']}")
    if lunar.pooranmashi:
        print("                 Pooranmashi")
    print(f"Solar date     : {en_s['date']} {en_s['monthName']} {en_s['year']}")
    print(f"                 {pa_s['date']} {pa_s['monthName']} {pa_s['year']}")
    print(f"Nakshatra      : {lunar.nakshatra.en} ({lunar.nakshatra.pa})")
    print(f"Sunrise        : {rec.sunrise if rec.sunrise is not None else '--'}")
    print(f"Kali / Saka    : {rec.kali_year} / {rec.saka_year}")
    print(f"Ahargana       : {lunar.ahargana}  JD {rec.julian_day}")


def cmd_day(argv: list[str]) -> int:
    import bikrami

    p = argparse.ArgumentParser(prog="bikrami day", description="Gregorian (or Julian) date -> Bikrami Panchang")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--julian", action="store_true", help="date is in the Julian calendar")
    p.add_argument("--engine", default="surya-siddhanta")
    p.add_argument("--json", action="store_true", help="print the nested record as JSON")
    args = p.parse_args(argv)

    # Julian 1700-02-29 is not a valid `date`
    day = _split_ymd(args.date) if args.julian else _parse_ymd(args.date)
    rec = bikrami.get_panchang(day, args.julian, engine=args.engine)
    if args.json:
        print(json.dumps(rec.as_dict(), ensure_ascii=False, indent=2, default=str))
    else:
        _print_record(rec)
    return 0


def cmd_sunrise(argv: list[str]) -> int:
    from bikrami.core.types import Location
    from bikrami.engines.specs import AMRITSAR
    from bikrami.engines.panchang import format_clock
    from bikrami.reference.solar import SphericalSunrise

    p = argparse.ArgumentParser(prog="bikrami sunrise", description="Sunrise time (IST) for a date and location.")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--lat", type=float, default=AMRITSAR.latitude, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, default=AMRITSAR.longitude, help="Observer longitude in degrees (positive East)")
    args = p.parse_args(argv)

    hours = SphericalSunrise().sunrise_utc_hours(_parse_ymd(args.date), Location(args.lat, args.lon))
    if hours is None:
        print("Sun does not rise.")
    else:
        print(format_clock(hours + 5.5, "IST"))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if "--verbose" in argv:
        argv = [a for a in argv if a != "--verbose"]
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    # Shorthand: `bikrami YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="bikrami", description="Bikrami Panchang toolkit CLI.")
    p.add_argument("--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian (or Julian) date -> Bikrami Panchang")
    sub.add_parser("sunrise", help="Sunrise time for a date")
    sub.add_parser("vaisakhi", help="Print 1 Vaisakh dates for a range of years")
    sub.add_parser("mal-maas", help="List intercalary lunar months for a range of years")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "sunrise":
        return cmd_sunrise(rest)

    if args.cmd == "vaisakhi":
        return _run_module_main("bikrami.diagnostics.vaisakhi_table", rest)

    if args.cmd == "mal-maas":
        return _run_module_main("bikrami.diagnostics.mal_maas", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
