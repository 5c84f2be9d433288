"""Display labels for prayer types and statuses.

Kept apart from the domain enums so credit logic stays presentation-free.
"""

from ibtida.domain.prayers import Gender, PrayerStatus, PrayerType

PRAYER_NAMES = {
    PrayerType.FAJR: ("Fajr", "الفجر"),
    PrayerType.DHUHR: ("Dhuhr", "الظهر"),
    PrayerType.ASR: ("Asr", "العصر"),
    PrayerType.MAGHRIB: ("Maghrib", "المغرب"),
    PrayerType.ISHA: ("Isha", "العشاء"),
    PrayerType.JUMUAH: ("Jumu'ah", "الجمعة"),
}

_STATUS_LABELS = {
    PrayerStatus.NONE: "Not logged",
    PrayerStatus.ON_TIME: "On time",
    PrayerStatus.LATE: "Later",
    PrayerStatus.QADA: "Qada",
    PrayerStatus.MISSED: "Missed",
    PrayerStatus.PRAYED_AT_MASJID: "In masjid (jamat)",
    PrayerStatus.PRAYED_AT_HOME: "At home (on time)",
    PrayerStatus.MENSTRUAL: "Not applicable",
    PrayerStatus.JUMMAH: "In masjid (Jumu'ah)",
}

_STATUS_ARABIC = {
    PrayerStatus.NONE: "لم يُسجَّل",
    PrayerStatus.ON_TIME: "أدّيتُها في وقتها",
    PrayerStatus.LATE: "متأخر",
    PrayerStatus.QADA: "قضاء",
    PrayerStatus.MISSED: "فاتتني",
    PrayerStatus.PRAYED_AT_MASJID: "في المسجد",
    PrayerStatus.PRAYED_AT_HOME: "في البيت",
    PrayerStatus.MENSTRUAL: "الحيض",
    PrayerStatus.JUMMAH: "صلاة الجمعة",
}


def prayer_display_name(prayer: PrayerType) -> str:
    return PRAYER_NAMES[prayer][0]


def prayer_full_name(prayer: PrayerType) -> str:
    """Return e.g. ``Fajr (الفجر)``."""
    english, arabic = PRAYER_NAMES[prayer]
    return f"{english} ({arabic})"


def status_display_name(status: PrayerStatus, gender: Gender | None = None) -> str:
    """Return the picker label for a status.

    Brothers see legacy ``late`` entries as ``On time``.
    """
    if status == PrayerStatus.LATE and gender == Gender.BROTHER:
        return _STATUS_LABELS[PrayerStatus.ON_TIME]
    return _STATUS_LABELS[status]


def status_arabic_description(status: PrayerStatus) -> str:
    return _STATUS_ARABIC[status]
