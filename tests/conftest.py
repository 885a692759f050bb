"""Shared fixtures: tiny kanjidic2, EDICT and frequency-list corpora."""

import sys
from pathlib import Path

import pytest

# Add project root to path for package imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from kanjicards.adapters.edict import DefinitionDictionary
from kanjicards.adapters.kanjidic import KanjiCatalog, parse_kanjidic_string
from kanjicards.adapters.wordfreq import WordFrequencyIndex
from kanjicards.examples import ExampleResolver


KANJIDIC_XML = """<?xml version="1.0" encoding="UTF-8"?>
<kanjidic2>
<header><file_version>4</file_version></header>
<character>
<literal>学</literal>
<misc><grade>1</grade><stroke_count>8</stroke_count><stroke_count>7</stroke_count><jlpt>4</jlpt></misc>
<reading_meaning><rmgroup>
<reading r_type="pinyin">xue2</reading>
<reading r_type="ja_on">ガク</reading>
<reading r_type="ja_kun">まな.ぶ</reading>
<meaning>study</meaning>
<meaning>learning</meaning>
<meaning>science</meaning>
<meaning m_lang="fr">étude</meaning>
</rmgroup></reading_meaning>
</character>
<character>
<literal>生</literal>
<misc><grade>1</grade><stroke_count>5</stroke_count><jlpt>4</jlpt></misc>
<reading_meaning><rmgroup>
<reading r_type="ja_on">セイ</reading>
<reading r_type="ja_on">ショウ</reading>
<reading r_type="ja_kun">い.きる</reading>
<reading r_type="ja_kun">う.まれる</reading>
<meaning>life</meaning>
<meaning>genuine</meaning>
<meaning>birth</meaning>
</rmgroup></reading_meaning>
</character>
<character>
<literal>漢</literal>
<misc><grade>3</grade><stroke_count>13</stroke_count><jlpt>2</jlpt></misc>
<reading_meaning><rmgroup>
<reading r_type="ja_on">カン</reading>
<meaning>Sino-</meaning>
<meaning>China</meaning>
<meaning m_lang="es">China</meaning>
</rmgroup></reading_meaning>
</character>
<character>
<literal>字</literal>
<misc><grade>1</grade><stroke_count>6</stroke_count></misc>
<reading_meaning><rmgroup>
<reading r_type="ja_on">ジ</reading>
<reading r_type="ja_kun">あざ</reading>
<meaning>character</meaning>
<meaning>letter</meaning>
<meaning>word</meaning>
</rmgroup></reading_meaning>
</character>
<character>
<literal>劇</literal>
<misc><grade>6</grade><stroke_count>15</stroke_count></misc>
<reading_meaning><rmgroup>
<reading r_type="ja_on">ゲキ</reading>
<meaning>drama</meaning>
<meaning>theatre</meaning>
</rmgroup></reading_meaning>
</character>
<character>
<literal>丼</literal>
<misc><stroke_count>5</stroke_count></misc>
<reading_meaning><rmgroup>
<reading r_type="ja_on">トン</reading>
<reading r_type="ja_kun">どんぶり</reading>
<meaning>bowl</meaning>
<meaning>(kokuji)</meaning>
</rmgroup></reading_meaning>
</character>
</kanjidic2>
"""

EDICT_LINES = [
    "学生 [がくせい] /(n) student/pupil/EntL1206900X/\n",
    "学生 [がくしょう] /(n) later duplicate/\n",
    "大学 [だいがく] /(n) (P) university/EntL1415290X/\n",
    "学者 [がくしゃ] /(n) scholar (an extremely long gloss used to push past the example size bound)/\n",
    "学校 [がっこう] /(n) school/\n",
    "漢字 [かんじ] /(n) kanji/Chinese character/\n",
    "文字 [もじ] /(n) letter (of alphabet)/character/\n",
    "生活 [せいかつ] /(n,vs) life/living/\n",
    "劇場 [げきじょう] /(n) theatre/playhouse/\n",
    "malformed-line-without-a-space\n",
]

WORDFREQ_LINES = [
    "# rank\tcount\tpos\tsub\tword|reading\n",
    "1\t9000\tx\tx\t学生|がくせい\n",
    "2\t8000\tx\tx\t大学|だいがく\n",
    "3\t7000\tx\tx\t学者|がくしゃ\n",
    "4\t6000\tx\tx\t留学|りゅうがく\n",
    "5\t5000\tx\tx\t学校|がっこう\n",
    "6\t4000\tx\tx\t学習|がくしゅう\n",
    "7\t3000\tx\tx\t漢字|かんじ\n",
    "8\t2000\tx\tx\t文字|もじ\n",
    "9\t1000\tx\tx\t生活|せいかつ\n",
    "10\t900\tx\tx\t劇場|げきじょう\n",
    "11\t800\tx\tx\t学|がく\n",
    "12\t700\tx\tx\t大学生活|だいがくせいかつ\n",
    "no tab on this line\n",
    "rank\tx\tx\tx\t化学|かがく\n",
]


@pytest.fixture
def kanjidic_path(tmp_path: Path) -> Path:
    path = tmp_path / "kanjidic2.xml"
    path.write_text(KANJIDIC_XML, encoding="utf-8")
    return path


@pytest.fixture
def edict_path(tmp_path: Path) -> Path:
    path = tmp_path / "edict.txt"
    path.write_text("".join(EDICT_LINES), encoding="utf-8")
    return path


@pytest.fixture
def wordfreq_path(tmp_path: Path) -> Path:
    path = tmp_path / "distribution.txt"
    path.write_text("".join(WORDFREQ_LINES), encoding="utf-8")
    return path


@pytest.fixture
def catalog() -> KanjiCatalog:
    return KanjiCatalog(parse_kanjidic_string(KANJIDIC_XML))


@pytest.fixture
def edict() -> DefinitionDictionary:
    return DefinitionDictionary.from_lines(EDICT_LINES)


@pytest.fixture
def wordfreq() -> WordFrequencyIndex:
    return WordFrequencyIndex.from_lines(WORDFREQ_LINES)


@pytest.fixture
def resolver(wordfreq: WordFrequencyIndex, edict: DefinitionDictionary) -> ExampleResolver:
    return ExampleResolver(wordfreq, edict)
