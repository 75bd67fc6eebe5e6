from __future__ import annotations
from typing import Any, Dict

from ..holidays import holidays_on, special_day
from . import sexagenary as sx
from .registry import register_attribute, jdn
from .tables import WEEKDAYS

def weekday(info) -> Dict[str, Any]:
    # Convention: 0=Mon..6=Sun, as date.weekday()
    w = info.civil_date.weekday()
    return {"weekday": w, "weekday_label": WEEKDAYS[w]}

def can_chi(info) -> Dict[str, Any]:
    lunar = info.lunar
    return {
        "can_chi_day": sx.day_can_chi(jdn(info)).name,
        "can_chi_month": sx.month_can_chi(lunar.month, lunar.year).name,
        "can_chi_year": sx.year_can_chi(lunar.year).name,
    }

def lunar_mansion(info) -> Dict[str, Any]:
    return {"lunar_mansion": sx.lunar_mansion(jdn(info))}

def day_activity(info) -> Dict[str, Any]:
    day = sx.day_can_chi(jdn(info))
    month = sx.month_can_chi(info.lunar.month, info.lunar.year)
    return {"day_activity": sx.day_activity(day.branch, month.branch)}

def five_element(info) -> Dict[str, Any]:
    day = sx.day_can_chi(jdn(info))
    return {"five_element": sx.five_element_name(day.stem, day.branch)}

def auspicious_hours(info) -> Dict[str, Any]:
    return {"auspicious_hours": list(sx.auspicious_hours(sx.day_can_chi(jdn(info)).branch))}

def solar_term(info) -> Dict[str, Any]:
    return {"solar_term": sx.solar_term(jdn(info), info.tz_hours)}

def holidays(info) -> Dict[str, Any]:
    return {
        "holidays": [h.title for h in holidays_on(info.civil_date, info.lunar)],
        "special_day": special_day(info.lunar),
    }

register_attribute("weekday", weekday)
register_attribute("can_chi", can_chi)
register_attribute("lunar_mansion", lunar_mansion)
register_attribute("day_activity", day_activity)
register_attribute("five_element", five_element)
register_attribute("auspicious_hours", auspicious_hours)
register_attribute("solar_term", solar_term)
register_attribute("holidays", holidays)
