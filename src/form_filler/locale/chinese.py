"""中国語（簡体字・繁体字）キーワード辞書"""

from ..analyzer.text_utils import has_han
from .keyword_dictionary import KeywordDictionary

CHINESE_KEYWORDS = [
    ('确认密码', 'password'),
    ('確認密碼', 'password'),
    ('验证码', 'verification_code'),
    ('驗證碼', 'verification_code'),
    ('出生日期', 'birthday'),
    ('手机号码', 'phone'),
    ('手機號碼', 'phone'),
    ('电话号码', 'phone'),
    ('電話號碼', 'phone'),
    ('电子邮箱', 'email'),
    ('電子郵箱', 'email'),
    ('电子邮件', 'email'),
    ('邮政编码', 'zipcode'),
    ('郵政編碼', 'zipcode'),
    ('详细地址', 'address'),
    ('詳細地址', 'address'),
    ('公司名称', 'company'),
    ('公司名稱', 'company'),
    ('身份证号', 'id_card'),
    ('身份證號', 'id_card'),
    ('信用卡号', 'credit_card'),
    ('信用卡號', 'credit_card'),
    ('持卡人姓名', 'account_name'),
    ('有效期', 'credit_card_expiry'),
    ('安全码', 'credit_card_cvv'),
    ('安全碼', 'credit_card_cvv'),
    ('银行账号', 'account_number'),
    ('銀行賬號', 'account_number'),
    ('网站地址', 'url'),
    ('網站地址', 'url'),
    ('用户名', 'username'),
    ('用戶名', 'username'),
    ('密码', 'password'),
    ('密碼', 'password'),
    ('姓名', 'name'),
    ('手机', 'phone'),
    ('手機', 'phone'),
    ('电话', 'phone'),
    ('電話', 'phone'),
    ('邮箱', 'email'),
    ('郵箱', 'email'),
    ('地址', 'address'),
    ('省份', 'state'),
    ('城市', 'city'),
    ('区县', 'city'),
    ('區縣', 'city'),
    ('国家', 'country'),
    ('國家', 'country'),
    ('性别', 'sex'),
    ('性別', 'sex'),
    ('年龄', 'age'),
    ('年齡', 'age'),
    ('职业', 'job_title'),
    ('職業', 'job_title'),
    ('职位', 'job_title'),
    ('職位', 'job_title'),
    ('公司', 'company'),
    ('部门', 'department'),
    ('部門', 'department'),
    ('传真', 'phone'),
    ('傳真', 'phone'),
    ('搜索', 'search'),
    ('搜尋', 'search'),
    ('价格', 'price'),
    ('價格', 'price'),
    ('数量', 'number'),
    ('數量', 'number'),
    ('描述', 'description'),
    ('说明', 'description'),
    ('說明', 'description'),
    # 単漢字は最後
    ('姓', 'lastname'),
    ('名', 'firstname'),
    ('省', 'state'),
    ('市', 'city'),
    ('区', 'city'),
    ('區', 'city'),
    ('男', 'sex'),
    ('女', 'sex'),
]

CHINESE = KeywordDictionary(language='zh', entries=CHINESE_KEYWORDS, detector=has_han)
