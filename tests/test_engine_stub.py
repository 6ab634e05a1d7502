# tests/test_engine_stub.py
#
# Calendar rules end to end, with the astronomy replaced by fixed values.

from datetime import date

import pytest

import bikrami
from bikrami.core.errors import OutOfRangeAstronomicalValueError
from bikrami.utils.unicode_num import from_unicode_num

from conftest import FixedSunrise, moon_at_tithi

D = date(2024, 1, 1)


def test_full_moon_is_pooranmashi(stub_engine):
    eng, _ = stub_engine(sun=10.0, moon=moon_at_tithi(10.0, 14.5), masa=0)
    rec = eng.panchang(D)
    assert rec.lunar.pooranmashi is True
    assert rec.lunar.paksha is bikrami.Paksha.SUDI
    assert rec.lunar.tithi == 15
    lunar = rec.as_dict()["lunarDate"]
    assert lunar["pooranmashi"] is True
    assert lunar["englishDate"]["paksh"] == "Sudi"
    assert lunar["englishDate"]["monthName"] == "Chet"
    assert lunar["tithiFraction"] == pytest.approx(0.5)


def test_sudi_14_is_not_pooranmashi(stub_engine):
    eng, _ = stub_engine(sun=10.0, moon=moon_at_tithi(10.0, 13.2))
    assert eng.panchang(D).lunar.pooranmashi is False


def test_amavas_is_vadi_15(stub_engine):
    eng, _ = stub_engine(sun=10.0, moon=moon_at_tithi(10.0, 29.5), masa=2)
    rec = eng.panchang(D)
    assert rec.lunar.paksha is bikrami.Paksha.VADI
    assert rec.lunar.tithi == 15
    assert rec.lunar.pooranmashi is False
    # Purnimanta: the dark half belongs to the next month
    assert rec.lunar.month_name.en == "Harh"


def test_adhika_month_skips_vadi_advance(stub_engine):
    # Both new moons with the Sun in Karka (90-120 deg)
    eng, _ = stub_engine(sun=110.0, moon=moon_at_tithi(110.0, 20.2), last_conj=95.0, next_conj=119.0, masa=4)
    rec = eng.panchang(D)
    assert rec.lunar.mal_maas is True
    assert rec.lunar.paksha is bikrami.Paksha.VADI
    assert rec.lunar.tithi == 6
    assert rec.lunar.month_index == 4
    assert rec.lunar.month_name.en == "Sawan"


def test_nija_month_advances_on_vadi(stub_engine):
    eng, _ = stub_engine(sun=110.0, moon=moon_at_tithi(110.0, 20.2), last_conj=95.0, next_conj=125.0, masa=4)
    rec = eng.panchang(D)
    assert rec.lunar.mal_maas is False
    assert rec.lunar.month_index == 5


def test_phagan_vadi_opens_new_year(stub_engine):
    eng, stub = stub_engine(sun=340.0, moon=moon_at_tithi(340.0, 18.0), last_conj=325.0, next_conj=354.0,
                            masa=11, saura_masa=11, kali=5124)
    rec = eng.panchang(D, debug=True)
    assert rec.lunar.month_index == 0
    assert rec.lunar.month_name.en == "Chet"
    assert rec.kali_year == 5125
    assert rec.saka_year == 1946
    assert rec.lunar.year == 2081
    # Solar date still in the old year: Mina month with lunar Chet
    assert rec.solar.year == 2080
    # Year lookup anchored with the month before the Vadi shift
    assert stub.kali_args == [pytest.approx(rec.debug["ahargana"] - 210.0)]


def test_kali_lookup_uses_anchor(stub_engine):
    eng, stub = stub_engine(masa=2)
    rec = eng.panchang(D, debug=True)
    assert stub.kali_args == [pytest.approx(rec.debug["ahargana"] + 60.0)]


def test_phagan_sudi_with_mesha_sun_increments_solar_year(stub_engine):
    eng, _ = stub_engine(sun=2.0, moon=moon_at_tithi(2.0, 3.0), masa=11, saura_masa=0, saura_divasa=2, kali=5124)
    rec = eng.panchang(D)
    assert rec.lunar.year == 2080
    assert rec.solar.year == 2081


def test_solar_date_vaisakh_first(stub_engine):
    eng, _ = stub_engine(saura_masa=0, saura_divasa=1)
    en = eng.panchang(D).solar.english_date()
    assert en["date"] == 1
    assert en["month"] == 1
    assert en["monthName"] == "Vaisakh"
    assert en["day"] == "Monday"

    eng, _ = stub_engine(saura_masa=11, saura_divasa=30)
    en = eng.panchang(D).solar.english_date()
    assert en["month"] == 12
    assert en["monthName"] == "Chet"


def test_bilingual_fields_agree(stub_engine):
    eng, _ = stub_engine(sun=10.0, moon=moon_at_tithi(10.0, 22.7), masa=6, saura_masa=5, saura_divasa=17)
    out = eng.panchang(D).as_dict()
    for block in (out["lunarDate"], out["solarDate"]):
        en, pa = block["englishDate"], block["punjabiDate"]
        assert set(en) == set(pa)
        for key, value in en.items():
            if isinstance(value, int):
                assert from_unicode_num(pa[key]) == str(value)
    assert out["lunarDate"]["punjabiDate"]["paksh"] == "ਵਦੀ"
    assert out["lunarDate"]["punjabiDate"]["monthName"] == "ਕੱਤਕ"
    assert out["solarDate"]["punjabiDate"]["day"] == "ਸੋਮਵਾਰ"


def test_record_shape(stub_engine):
    eng, _ = stub_engine(moon=200.0)
    out = eng.panchang(D).as_dict()
    assert set(out) == {"gregorianDate", "julianDay", "lunarDate", "solarDate", "sunrise", "kaliYear", "sakaYear"}
    assert set(out["lunarDate"]) == {
        "ahargana", "malMaas", "pooranmashi", "englishDate", "punjabiDate", "nakshatra", "tithiFraction",
    }
    assert set(out["lunarDate"]["englishDate"]) == {"month", "monthName", "paksh", "tithi", "year"}
    assert set(out["solarDate"]["englishDate"]) == {"month", "monthName", "date", "year", "day"}
    assert out["gregorianDate"] == D
    assert out["julianDay"] == 2460310.5
    assert out["sunrise"] == "6:00 AM IST"
    # 200 deg -> 15th nakshatra
    assert out["lunarDate"]["nakshatra"] == {"en": "Vishakha", "pa": "ਵਿਸ਼ਾਖਾ"}
    assert out["lunarDate"]["ahargana"] == 1871845


def test_julian_block_rules(stub_engine):
    eng, _ = stub_engine()
    assert eng.panchang(date(1752, 9, 13)).julian_date is not None
    assert eng.panchang(date(1752, 9, 14)).julian_date is None
    assert "julianDate" not in eng.panchang(D).as_dict()

    rec = eng.panchang(date(1700, 1, 1), is_julian=True)
    assert rec.gregorian_date == date(1700, 1, 11)
    assert rec.as_dict()["julianDate"] == {"year": 1700, "month": 1, "monthName": "January", "date": 1}

    # Flag set forces the block even after the cutover
    rec = eng.panchang(date(2024, 1, 1), is_julian=True)
    assert rec.gregorian_date == date(2024, 1, 14)
    assert rec.julian_date.as_dict() == {"year": 2024, "month": 1, "monthName": "January", "date": 1}


def test_no_sunrise(stub_engine):
    eng, _ = stub_engine(sunrise=FixedSunrise(None))
    assert eng.panchang(D).sunrise is None


def test_out_of_range_values(stub_engine):
    eng, _ = stub_engine(masa=12)
    with pytest.raises(OutOfRangeAstronomicalValueError):
        eng.panchang(D)

    eng, _ = stub_engine(saura_masa=-1)
    with pytest.raises(OutOfRangeAstronomicalValueError):
        eng.panchang(D)

    eng, _ = stub_engine(moon=400.0)
    with pytest.raises(OutOfRangeAstronomicalValueError):
        eng.panchang(D)


def test_registry_accepts_injected_engine(stub_engine):
    eng, _ = stub_engine(moon=moon_at_tithi(10.0, 14.2))
    bikrami.register_engine("stub-test", eng, overwrite=True)
    assert "stub-test" in bikrami.list_engines()
    assert bikrami.get_panchang(D, engine="stub-test").lunar.pooranmashi is True
    assert bikrami.engine_info("stub-test")["name"] == "stub"
    with pytest.raises(KeyError):
        bikrami.register_engine("stub-test", eng)
    with pytest.raises(KeyError):
        bikrami.get_panchang(D, engine="no-such-engine")


def test_julian_triple_input(stub_engine):
    eng, _ = stub_engine()
    rec = eng.panchang((1500, 2, 29), is_julian=True)
    assert rec.gregorian_date == date(1500, 3, 10)
    assert rec.julian_date.as_dict() == {"year": 1500, "month": 2, "monthName": "February", "date": 29}
    # Gregorian triples work as dates
    assert eng.panchang((2024, 1, 1)) == eng.panchang(D)


def test_registry_membership(stub_engine):
    from bikrami.core.engine import EngineRegistry

    eng, _ = stub_engine()
    reg = EngineRegistry()
    assert "stub" not in reg
    reg.register("stub", eng)
    assert "stub" in reg
    assert reg.list() == ["stub"]
    assert [r.gregorian_date for r in reg.get("stub").panchang_range(D, 3)] == [
        date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3),
    ]
