from pathlib import Path

from koj.config import settings
from koj.models import LineRecord
from koj.search.line_store import LineStore

JAP_JI = {
    "name": "Jap Ji Sahib",
    "writer": "Guru Nanak Dev Ji",
    "page": "Ang",
}

SAMPLE_LINES = [
    {
        "id": "1",
        "shabad_id": "1",
        "source_page": 1,
        "gurmukhi": "ੴ ਸਤਿ ਨਾਮੁ; ਕਰਤਾ ਪੁਰਖੁ; ਨਿਰਭਉ; ਨਿਰਵੈਰੁ; ਅਕਾਲ ਮੂਰਤਿ; ਅਜੂਨੀ; ਸੈਭੰ; ਗੁਰ ਪ੍ਰਸਾਦਿ ॥",
        "transliterations": {
            "1": "ikoa(n)kaar sat naam karataa purakh nirabhau niravair akaal moorat ajoonee saibha(n) gur prasaadh ||"
        },
        "translations": {
            "1": "One Universal Creator God. The Name Is Truth. Creative Being Personified. No Fear. No Hatred. Image Of The Undying, Beyond Birth, Self-Existent. By Guru's Grace"
        },
        "section": JAP_JI,
    },
    {
        "id": "2",
        "shabad_id": "1",
        "source_page": 1,
        "gurmukhi": "ਆਦਿ ਸਚੁ; ਜੁਗਾਦਿ ਸਚੁ ॥",
        "transliterations": {"1": "aadh sach jugaadh sach ||"},
        "translations": {"1": "True In The Primal Beginning. True Throughout The Ages."},
        "section": JAP_JI,
    },
    {
        "id": "3",
        "shabad_id": "1",
        "source_page": 1,
        "gurmukhi": "ਹੈ ਭੀ ਸਚੁ; ਨਾਨਕ; ਹੋਸੀ ਭੀ ਸਚੁ ॥੧॥",
        "transliterations": {"1": "hai bhee sach naanak hosee bhee sach ||1||"},
        "translations": {
            "1": "True Here And Now. O Nanak, Forever And Ever True. ||1||"
        },
        "section": JAP_JI,
    },
    {
        "id": "4",
        "shabad_id": "1",
        "source_page": 1,
        "gurmukhi": "ਸੋਚੈ ਸੋਚਿ ਨ ਹੋਵਈ; ਜੇ ਸੋਚੀ ਲਖ ਵਾਰ ॥",
        "transliterations": {"1": "sochai soch na hovee je sochee lakh vaar ||"},
        "translations": {
            "1": "By thinking, He cannot be reduced to thought, even by thinking hundreds of thousands of times."
        },
        "section": JAP_JI,
    },
    {
        "id": "5",
        "shabad_id": "2",
        "source_page": 8,
        "gurmukhi": "ਸੋ ਦਰੁ ਕੇਹਾ; ਸੋ ਘਰੁ ਕੇਹਾ; ਜਿਤੁ ਬਹਿ; ਸਰਬ ਸਮਾਲੇ ॥",
        "transliterations": {
            "1": "so dhar kehaa so ghar kehaa jit beh sarab samaale ||"
        },
        "translations": {
            "1": "Where is That Gate, and Where is That Dwelling, in which You sit and take care of all?"
        },
        "section": JAP_JI,
    },
]


def create_sample_database(db_path: Path | None = None):
    store = LineStore(db_path or settings.DATABASE_PATH)
    store.open()
    try:
        for data in SAMPLE_LINES:
            store.add_line(LineRecord.from_dict(data))
        print(store.get_stats())
    finally:
        store.close()


create_sample_database()
