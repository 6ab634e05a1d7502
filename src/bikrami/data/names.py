"""
bikrami.data.names
------------------
Static name tables in English and Gurmukhi.

Month tables are lunar-ordered (index 0 = Chet). Weekdays start on Sunday.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Name:
    en: str
    pa: str


MONTHS: Tuple[Name, ...] = (
    Name("Chet", "ਚੇਤ"),
    Name("Vaisakh", "ਵੈਸਾਖ"),
    Name("Jeth", "ਜੇਠ"),
    Name("Harh", "ਹਾੜ"),
    Name("Sawan", "ਸਾਵਣ"),
    Name("Bhadon", "ਭਾਦੋਂ"),
    Name("Assu", "ਅੱਸੂ"),
    Name("Katak", "ਕੱਤਕ"),
    Name("Maghar", "ਮੱਘਰ"),
    Name("Poh", "ਪੋਹ"),
    Name("Magh", "ਮਾਘ"),
    Name("Phagan", "ਫੱਗਣ"),
)

WEEKDAYS: Tuple[Name, ...] = (
    Name("Sunday", "ਐਤਵਾਰ"),
    Name("Monday", "ਸੋਮਵਾਰ"),
    Name("Tuesday", "ਮੰਗਲਵਾਰ"),
    Name("Wednesday", "ਬੁੱਧਵਾਰ"),
    Name("Thursday", "ਵੀਰਵਾਰ"),
    Name("Friday", "ਸ਼ੁੱਕਰਵਾਰ"),
    Name("Saturday", "ਸ਼ਨਿੱਚਰਵਾਰ"),
)

NAKSHATRAS: Tuple[Name, ...] = (
    Name("Ashwini", "ਅਸ਼ਵਨੀ"),
    Name("Bharani", "ਭਰਣੀ"),
    Name("Krittika", "ਕ੍ਰਿਤਿਕਾ"),
    Name("Rohini", "ਰੋਹਿਣੀ"),
    Name("Mrigashira", "ਮ੍ਰਿਗਸ਼ਿਰਾ"),
    Name("Ardra", "ਆਰਦ੍ਰਾ"),
    Name("Punarvasu", "ਪੁਨਰਵਸੁ"),
    Name("Pushya", "ਪੁਸ਼ਯ"),
    Name("Ashlesha", "ਅਸ਼ਲੇਸ਼ਾ"),
    Name("Magha", "ਮਘਾ"),
    Name("Purva Phalguni", "ਪੂਰਵਾ ਫਾਲਗੁਨੀ"),
    Name("Uttara Phalguni", "ਉੱਤਰਾ ਫਾਲਗੁਨੀ"),
    Name("Hasta", "ਹਸਤ"),
    Name("Chitra", "ਚਿੱਤਰਾ"),
    Name("Swati", "ਸਵਾਤੀ"),
    Name("Vishakha", "ਵਿਸ਼ਾਖਾ"),
    Name("Anuradha", "ਅਨੁਰਾਧਾ"),
    Name("Jyeshtha", "ਜਯੇਸ਼ਠਾ"),
    Name("Mula", "ਮੂਲ"),
    Name("Purva Ashadha", "ਪੂਰਵਾ ਆਸ਼ਾੜਾ"),
    Name("Uttara Ashadha", "ਉੱਤਰਾ ਆਸ਼ਾੜਾ"),
    Name("Shravana", "ਸ਼ਰਵਣ"),
    Name("Dhanishta", "ਧਨਿਸ਼ਠਾ"),
    Name("Shatabhisha", "ਸ਼ਤਭਿਸ਼ਾ"),
    Name("Purva Bhadrapada", "ਪੂਰਵਾ ਭਾਦਰਪਦ"),
    Name("Uttara Bhadrapada", "ਉੱਤਰਾ ਭਾਦਰਪਦ"),
    Name("Revati", "ਰੇਵਤੀ"),
)

# Julian-calendar block only carries English month names
GREGORIAN_MONTHS: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

GURMUKHI_DIGITS: Tuple[str, ...] = ("੦", "੧", "੨", "੩", "੪", "੫", "੬", "੭", "੮", "੯")
