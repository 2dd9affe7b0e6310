"""Hiragana to romanji transliteration."""

from types import MappingProxyType

# ──────────────────────────────────────────────────────────────────────────────
# TABLES
# ──────────────────────────────────────────────────────────────────────────────
# Two-codepoint sequences. Most keys start with a kana that also has a
# single-codepoint entry, so these must be tried first.
LONG_ENTRIES = MappingProxyType({
    # Long vowels
    "ああ": "aa", "いい": "ii", "うう": "uu", "ええ": "ee", "おお": "oo",
    "かあ": "kaa", "きい": "kii", "くう": "kuu", "けえ": "kee", "こお": "koo",
    "さあ": "saa", "しい": "shii", "すう": "suu", "せえ": "see", "そお": "soo",
    "たあ": "taa", "ちい": "chii", "つう": "tsuu", "てえ": "tee", "とお": "too",
    "なあ": "naa", "にい": "nii", "ぬう": "nuu", "ねえ": "nee", "のお": "noo",
    "はあ": "haa", "ひい": "hii", "ふう": "fuu", "へえ": "hee", "ほお": "hoo",
    "まあ": "maa", "みい": "mii", "むう": "muu", "めえ": "mee", "もお": "moo",
    "やあ": "yaa", "ゆう": "yuu", "よお": "yoo",
    "らあ": "raa", "りい": "rii", "るう": "ruu", "れえ": "ree", "ろお": "roo",
    "わあ": "waa", "をお": "woo",
    "があ": "gaa", "ぎい": "gii", "ぐう": "guu", "げえ": "gee", "ごお": "goo",
    "ざあ": "zaa", "じい": "jii", "ずう": "zuu", "ぜえ": "zee", "ぞお": "zoo",
    "だあ": "daa", "ぢい": "jii", "づう": "zuu", "でえ": "dee", "どお": "doo",
    "ばあ": "baa", "びい": "bii", "ぶう": "buu", "べえ": "bee", "ぼお": "boo",
    "ぱあ": "paa", "ぴい": "pii", "ぷう": "puu", "ぺえ": "pee", "ぽお": "poo",
    # Contracted sounds (yoon)
    "きゃ": "kya", "きゅ": "kyu", "きょ": "kyo",
    "しゃ": "sha", "しゅ": "shu", "しょ": "sho",
    "ちゃ": "cha", "ちゅ": "chu", "ちょ": "cho",
    "にゃ": "nya", "にゅ": "nyu", "にょ": "nyo",
    "ひゃ": "hya", "ひゅ": "hyu", "ひょ": "hyo",
    "みゃ": "mya", "みゅ": "myu", "みょ": "myo",
    "りゃ": "rya", "りゅ": "ryu", "りょ": "ryo",
    "ぎゃ": "gya", "ぎゅ": "gyu", "ぎょ": "gyo",
    "じゃ": "ja", "じゅ": "ju", "じょ": "jo",
    "ぢゃ": "ja", "ぢゅ": "ju", "ぢょ": "jo",
    "びゃ": "bya", "びゅ": "byu", "びょ": "byo",
    "ぴゃ": "pya", "ぴゅ": "pyu", "ぴょ": "pyo",
    # Geminated consonants (sokuon)
    "っか": "kka", "っき": "kki", "っく": "kku", "っけ": "kke", "っこ": "kko",
    "っさ": "ssa", "っし": "sshi", "っす": "ssu", "っせ": "sse", "っそ": "sso",
    "った": "tta", "っち": "tchi", "っつ": "ttsu", "って": "tte", "っと": "tto",
    "っぱ": "ppa", "っぴ": "ppi", "っぷ": "ppu", "っぺ": "ppe", "っぽ": "ppo",
    "っが": "gga", "っぎ": "ggi", "っぐ": "ggu", "っげ": "gge", "っご": "ggo",
    "っざ": "zza", "っじ": "jji", "っず": "zzu", "っぜ": "zze", "っぞ": "zzo",
    "っだ": "dda", "っぢ": "jji", "っづ": "zzu", "っで": "dde", "っど": "ddo",
    "っば": "bba", "っび": "bbi", "っぶ": "bbu", "っべ": "bbe", "っぼ": "bbo",
})

SHORT_ENTRIES = MappingProxyType({
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    "わ": "wa", "ゐ": "wi", "ゑ": "we", "を": "wo",
    "ん": "n",
    # Voiced (dakuten) and semi-voiced (handakuten)
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    "ゔ": "vu",
    # Small kana on their own
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo", "ゎ": "wa",
    # Prolonged sound mark left in loanword readings
    "ー": "-",
})


class JapaneseRomanizer:
    """Longest-match-first transliteration of Hiragana into romanji."""

    def __init__(self, long_entries=LONG_ENTRIES, short_entries=SHORT_ENTRIES):
        self._long = long_entries
        self._short = short_entries

    def to_romanji(self, hiragana: str) -> str:
        """Transliterate *hiragana*.

        At each position a two-codepoint entry is tried before a single one,
        so ``しい`` becomes ``shii`` through its own entry rather than ``shi``
        followed by ``i``. Anything without an entry (kanji, punctuation,
        Latin text, a trailing small っ) is copied through unchanged.
        """
        out = []
        i = 0
        while i < len(hiragana):
            pair = hiragana[i:i + 2]
            if len(pair) == 2 and pair in self._long:
                out.append(self._long[pair])
                i += 2
                continue
            ch = hiragana[i]
            out.append(self._short.get(ch, ch))
            i += 1
        return "".join(out)
