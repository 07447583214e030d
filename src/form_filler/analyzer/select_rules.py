"""
select 要素の判定ルール表と、タイプ別の推奨選択肢

スコア: name/id/ラベル一致 +50、option キーワード一致 +30、option 数が範囲内 +20。
同点は表の先頭側が勝つ。
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class SelectDetectionRule:
    type: str
    name_keywords: Tuple[str, ...]
    option_keywords: Tuple[str, ...] = ()
    # 妥当な option 数（両端含む）
    option_count_range: Optional[Tuple[int, int]] = None


SELECT_DETECTION_RULES: List[SelectDetectionRule] = [
    SelectDetectionRule(
        'country',
        ('country', 'nation', 'pais', 'pays', 'land', 'nationality', 'countrycode', 'country_code'),
        ('united states', 'united kingdom', 'canada', 'australia', 'germany', 'france', 'japan',
         'china', 'vietnam', 'india'),
        (50, 300),
    ),
    SelectDetectionRule(
        'state',
        ('state', 'province', 'region', 'prefecture', 'estado', 'provincia', 'county', 'department'),
        ('california', 'texas', 'new york', 'florida', 'ontario', 'quebec', 'tokyo', 'osaka'),
        (5, 100),
    ),
    SelectDetectionRule(
        'city',
        ('city', 'town', 'locality', 'ciudad', 'ville', 'stadt', 'municipality'),
        (),
        (10, 5000),
    ),
    SelectDetectionRule(
        'gender',
        ('gender', 'sex', 'gioi_tinh', 'genero', 'geschlecht', 'sexe'),
        ('male', 'female', 'other', 'prefer not', 'non-binary', 'nam', 'nữ', 'homme', 'femme',
         'männlich', 'weiblich'),
        (2, 10),
    ),
    SelectDetectionRule(
        'title',
        ('title', 'prefix', 'salutation', 'honorific', 'anrede'),
        ('mr', 'mrs', 'ms', 'miss', 'dr', 'prof', 'sir', 'herr', 'frau', 'ông', 'bà'),
        (2, 15),
    ),
    SelectDetectionRule(
        'year',
        ('year', 'birth_year', 'birthyear', 'dob_year', 'ano', 'année', 'jahr'),
        (),
        (10, 150),
    ),
    SelectDetectionRule(
        'month',
        ('month', 'birth_month', 'birthmonth', 'dob_month', 'mes', 'mois', 'monat'),
        ('january', 'february', 'march', 'april', 'may', 'june', 'july', 'august', 'september',
         'october', 'november', 'december', 'jan', 'feb', 'mar', 'apr', 'jun', 'jul', 'aug',
         'sep', 'oct', 'nov', 'dec'),
        (12, 12),
    ),
    SelectDetectionRule(
        'day',
        ('day', 'birth_day', 'birthday', 'dob_day', 'dia', 'jour', 'tag'),
        (),
        (28, 31),
    ),
    SelectDetectionRule(
        'age',
        ('age', 'tuoi', 'edad', 'alter'),
        (),
        (10, 150),
    ),
    SelectDetectionRule(
        'language',
        ('language', 'lang', 'idioma', 'langue', 'sprache', 'ngon_ngu'),
        ('english', 'spanish', 'french', 'german', 'japanese', 'chinese', 'vietnamese', 'korean',
         'portuguese'),
        (5, 200),
    ),
    SelectDetectionRule(
        'currency',
        ('currency', 'moneda', 'devise', 'wahrung', 'tien_te'),
        ('usd', 'eur', 'gbp', 'jpy', 'cny', 'vnd', 'aud', 'cad', 'dollar', 'euro', 'pound', 'yen'),
        (10, 200),
    ),
    SelectDetectionRule(
        'timezone',
        ('timezone', 'time_zone', 'tz', 'zona_horaria', 'fuseau', 'zeitzone'),
        ('utc', 'gmt', 'est', 'pst', 'cst', 'pdt', 'america/', 'europe/', 'asia/'),
        (20, 600),
    ),
    SelectDetectionRule(
        'industry',
        ('industry', 'sector', 'industria', 'branche', 'nganh'),
        ('technology', 'healthcare', 'finance', 'education', 'retail', 'manufacturing'),
        (10, 100),
    ),
    SelectDetectionRule(
        'employment_status',
        ('employment', 'employment_status', 'work_status', 'job_status', 'empleo', 'emploi'),
        ('employed', 'unemployed', 'self-employed', 'student', 'retired', 'full-time', 'part-time',
         'freelance'),
        (3, 15),
    ),
    SelectDetectionRule(
        'education',
        ('education', 'degree', 'qualification', 'educacion', 'bildung', 'hoc_van'),
        ('high school', 'bachelor', 'master', 'doctorate', 'phd', 'diploma', 'college',
         'university', 'graduate'),
        (4, 20),
    ),
    SelectDetectionRule(
        'marital_status',
        ('marital', 'marital_status', 'civil_status', 'relationship', 'estado_civil',
         'tinh_trang_hon_nhan'),
        ('single', 'married', 'divorced', 'widowed', 'separated', 'engaged', 'domestic'),
        (3, 10),
    ),
    SelectDetectionRule(
        'payment_method',
        ('payment', 'payment_method', 'pay_method', 'pago', 'zahlung', 'thanh_toan'),
        ('credit card', 'debit card', 'paypal', 'bank transfer', 'cash', 'crypto', 'wire'),
        (3, 15),
    ),
    SelectDetectionRule(
        'card_type',
        ('card_type', 'cardtype', 'credit_card_type', 'cc_type'),
        ('visa', 'mastercard', 'amex', 'american express', 'discover', 'jcb', 'diners'),
        (3, 10),
    ),
    SelectDetectionRule(
        'quantity',
        ('quantity', 'qty', 'amount', 'count', 'cantidad', 'quantite', 'menge', 'so_luong'),
        (),
        (1, 100),
    ),
    SelectDetectionRule(
        'rating',
        ('rating', 'score', 'stars', 'review', 'calificacion', 'note', 'bewertung', 'danh_gia'),
        (),
        (3, 11),
    ),
    SelectDetectionRule(
        'priority',
        ('priority', 'urgency', 'importance', 'prioridad', 'priorite', 'prioritat', 'uu_tien'),
        ('low', 'medium', 'high', 'urgent', 'critical', 'normal'),
        (2, 10),
    ),
    SelectDetectionRule(
        'boolean',
        ('agree', 'confirm', 'accept', 'subscribe', 'newsletter', 'terms', 'consent'),
        ('yes', 'no', 'true', 'false', 'có', 'không', 'si', 'oui', 'non', 'ja', 'nein'),
        (2, 3),
    ),
]


# スマート選択で優先する値（text/value への部分一致）
PREFERRED_OPTION_VALUES: Dict[str, Tuple[str, ...]] = {
    'country': ('united states', 'united kingdom', 'canada', 'australia', 'germany', 'japan',
                'vietnam'),
    'state': ('california', 'new york', 'texas', 'florida', 'ontario'),
    'gender': ('male', 'female', 'nam', 'nữ', 'homme', 'femme', 'männlich', 'other'),
    'title': ('mr', 'ms', 'mrs', 'ông', 'bà', 'herr', 'frau'),
    'language': ('english', 'tiếng việt', 'vietnamese', 'japanese', '日本語'),
    'currency': ('usd', 'eur', 'gbp', 'vnd', 'jpy'),
    'timezone': ('utc', 'america/new_york', 'america/los_angeles', 'asia/ho_chi_minh', 'asia/tokyo'),
    'industry': ('technology', 'information technology', 'software', 'finance', 'healthcare'),
    'employment_status': ('employed', 'full-time', 'working'),
    'education': ('bachelor', 'master', 'college', 'university', 'graduate'),
    'marital_status': ('single', 'married'),
    'payment_method': ('credit card', 'paypal', 'bank transfer'),
    'card_type': ('visa', 'mastercard'),
    'quantity': ('1', '2', '3'),
    'rating': ('5', '4'),
    'priority': ('medium', 'normal', 'high'),
    'boolean': ('yes', 'true', 'có', '1'),
}

# 選択肢を見てもスコア最小値に届かない場合の既定タイプ
SELECT_UNKNOWN = 'unknown'
MIN_SELECT_SCORE = 50

NAME_MATCH_SCORE = 50
OPTION_MATCH_SCORE = 30
OPTION_COUNT_SCORE = 20
# option キーワードは異なる2語以上の一致を要求する
MIN_OPTION_KEYWORD_HITS = 2
