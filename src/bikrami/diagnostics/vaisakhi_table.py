from __future__ import annotations

from datetime import date, timedelta
import argparse
from typing import Optional

import bikrami


# Siddhantic year (365.258756 d) less the Gregorian year (365.2425 d)
_DRIFT_DAYS_PER_YEAR = 0.016256
_SEARCH_HALF_WIDTH = 12


def vaisakhi_date(year: int, *, engine: str = "surya-siddhanta") -> Optional[date]:
    """
    Gregorian date of 1 Vaisakh (Mesha sankranti day) in a Gregorian year.
    The search is centred on 13 April 2024 moved by the sankranti's drift
    through the Gregorian year, about one day every 61 years.
    """
    centre = date(year, 4, 13) + timedelta(days=round((year - 2024) * _DRIFT_DAYS_PER_YEAR))
    start = centre - timedelta(days=_SEARCH_HALF_WIDTH)
    for rec in bikrami.get_panchang_range(start, 2 * _SEARCH_HALF_WIDTH + 1, engine=engine):
        if rec.solar.saura_masa == 0 and rec.solar.date == 1:
            return rec.gregorian_date
    return None


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print the Vaisakhi (1 Vaisakh) date for a range of years.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--engine", default="surya-siddhanta")
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    line = "Year   1 Vaisakh    Solar year"
    print(line)
    print("-" * len(line))
    for Y in range(Y0, Y1 + 1):
        d = vaisakhi_date(Y, engine=args.engine)
        if d is None:
            print(f"{Y:<6} (not found)")
            continue
        rec = bikrami.get_panchang(d, engine=args.engine)
        print(f"{Y:<6} {d.isoformat()}   {rec.solar.year}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
