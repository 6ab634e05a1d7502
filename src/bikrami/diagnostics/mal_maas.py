#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from datetime import date
from typing import List

import bikrami


@dataclass(frozen=True)
class MalMaasSpan:
    first: date
    last: date
    month_name: str  # English label of the intercalary month
    year: int        # Bikrami year

    @property
    def days(self) -> int:
        return (self.last - self.first).days + 1


def mal_maas_spans(from_year: int, to_year: int, *, engine: str = "surya-siddhanta") -> List[MalMaasSpan]:
    """Intercalary lunar months overlapping Gregorian years from_year..to_year."""
    start, end = date(from_year, 1, 1), date(to_year, 12, 31)
    out: List[MalMaasSpan] = []
    run: List[bikrami.PanchangRecord] = []
    for rec in bikrami.get_panchang_range(start, (end - start).days + 1, engine=engine):
        if rec.lunar.mal_maas:
            run.append(rec)
            continue
        if run:
            out.append(_span(run))
            run = []
    if run:
        out.append(_span(run))
    return out


def _span(run) -> MalMaasSpan:
    head = run[0].lunar
    return MalMaasSpan(run[0].gregorian_date, run[-1].gregorian_date, head.month_name.en, head.year)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="List mal maas (adhika) lunar months in a range of years.")
    p.add_argument("--from-year", type=int, default=2020)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--engine", default="surya-siddhanta")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    spans = mal_maas_spans(args.from_year, args.to_year, engine=args.engine)
    if not spans:
        print("(none)")
        return 0
    for s in spans:
        print(f"{s.first.isoformat()} .. {s.last.isoformat()}  Adhika {s.month_name} {s.year} ({s.days} days)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
