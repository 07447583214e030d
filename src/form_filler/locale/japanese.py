"""日本語キーワード辞書（長いフレーズ優先）"""

from ..analyzer.text_utils import has_cjk
from .keyword_dictionary import KeywordDictionary

JAPANESE_KEYWORDS = [
    # 8文字以上
    ('セキュリティコード', 'credit_card_cvv'),
    # 5文字
    ('マンション', 'building'),
    ('フルネーム', 'name'),
    ('パスワード', 'password'),
    # 4文字
    ('電話番号', 'phone'),
    ('生年月日', 'birthday'),
    # state より具体的な prefecture を使う
    ('都道府県', 'prefecture'),
    ('市区町村', 'city'),
    ('郵便番号', 'zipcode'),
    ('部屋番号', 'room_number'),
    ('有効期限', 'date'),
    ('フリガナ', 'name'),
    ('ふりがな', 'name'),
    ('ログイン', 'login'),
    ('ユーザー', 'user'),
    # 3文字
    ('会社名', 'company'),
    ('誕生日', 'birthday'),
    ('連絡先', 'phone'),
    ('カード', 'credit_card'),
    ('メール', 'email'),
    ('FAX', 'phone'),
    # 2文字
    ('電話', 'phone'),
    ('名前', 'name'),
    ('氏名', 'name'),
    ('住所', 'address'),
    ('会社', 'company'),
    ('年齢', 'age'),
    ('建物', 'building'),
    ('ビル', 'building'),
    ('番地', 'address'),
    ('携帯', 'phone'),
    ('役職', 'job_title'),
    ('職業', 'job_title'),
    ('日付', 'date'),
    ('名義', 'account_name'),
    ('性別', 'sex'),
    ('カナ', 'name'),
    ('かな', 'name'),
    ('メイ', 'firstname'),
    ('セイ', 'lastname'),
    # 1文字
    ('国', 'country'),
    ('姓', 'lastname'),
    ('名', 'firstname'),
]

JAPANESE = KeywordDictionary(language='ja', entries=JAPANESE_KEYWORDS, detector=has_cjk)
