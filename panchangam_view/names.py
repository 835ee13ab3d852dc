"""Nakshatra name table (English -> Sanskrit / Telugu / Tamil).

Used for display only; matching and resolution always use the English name as
it appears in the source text.
"""

from types import MappingProxyType  # Read-only view over the table
from typing import Mapping, Tuple  # Type hints

# English: (Sanskrit, Telugu, Tamil)
NAKSHATRA_NAMES: Mapping[str, Tuple[str, str, str]] = MappingProxyType({
    "Aardra": ("आर्द्रा", "ఆరుద్ర", "திருவாதிரை"),
    "Anuradha": ("अनुराधा", "అనురాధ", "அனுஷம்"),
    "Apabharani": ("भरणी", "భరణి", "பரணி"),
    "Ashresha": ("आश्लेषा", "ఆశ్లేష", "ஆயில்யம்"),
    "Ashwini": ("अश्विनी", "అశ్విని", "அசுவினி"),
    "Chitra": ("चित्रा", "చిత్ర", "சித்திரை"),
    "Hasta": ("हस्त", "హస్త", "ஹஸ்தம்"),
    "Jyeshtaa": ("ज्येष्ठा", "జ్యేష్ట", "கேட்டை"),
    "Krutthika": ("कृत्तिका", "కృత్తిక", "கிருத்திகை"),
    "Magha": ("मघा", "మఘ", "மகம்"),
    "Mrugasheersham": ("मृगशीर्षा", "మృగశిర", "மிருகசீரிடம்"),
    "Mula": ("मूल", "మూల", "மூலம்"),
    "Poorvaashada": ("पूर्वाषाढा", "పూర్వాషాఢ", "பூராடம்"),
    "Poorvaphalguni": ("पूर्व फाल्गुनी", "పూర్వ ఫల్గుని", "பூரம்"),
    "Poorvaproshtapada": ("पूर्वभाद्रपदा", "పూర్వాభాద్ర", "பூரட்டாதி"),
    "Punarvasu": ("पुनर्वसू", "పునర్వసు", "புனர்பூசம்"),
    "Pushya": ("पुष्य", "పుష్య", "பூசம்"),
    "Revathi": ("रेवती", "రేవతి", "ரேவதி"),
    "Rohini": ("रोहिणी", "రోహిణి", "ரோகிணி"),
    "Shatabhishak": ("शतभिषा", "శతభిష", "சதயம்"),
    "Shravana": ("श्रवण", "శ్రవణ", "திருவோணம்"),
    "Shravishta": ("धनिष्ठा", "ధనిష్ఠ", "அவிட்டம்"),
    "Swaathi": ("स्वाति", "స్వాతి", "சுவாதி"),
    "Uttaraashada": ("उत्तराषाढा", "ఉత్తరాషాఢ", "உத்திராடம்"),
    "Uttaraphalguni": ("उत्तर फाल्गुनी", "ఉత్తర ఫల్గుని", "உத்திரம்"),
    "Uttaraproshtapada": ("उत्तरभाद्रपदा", "ఉత్తరాభాద్ర", "உத்திரட்டாதி"),
    "Vishaakha": ("विशाखा", "విశాఖ", "விசாகம்"),
})


def format_nakshatra_display(english_name: str) -> str:
    """Render a nakshatra as "English / Sanskrit / Telugu / Tamil".

    Minor surrounding whitespace is ignored. Unknown names fall back to the
    trimmed English name alone.
    """
    key = str(english_name or "").strip()
    scripts = NAKSHATRA_NAMES.get(key)
    if scripts is None:
        return key
    return " / ".join((key,) + scripts)
