"""ロシア語キーワード辞書"""

from ..analyzer.text_utils import has_cyrillic
from .keyword_dictionary import KeywordDictionary

RUSSIAN_KEYWORDS = [
    ('подтвердите пароль', 'password'),
    ('повторите пароль', 'password'),
    ('адрес электронной почты', 'email'),
    ('электронная почта', 'email'),
    ('номер телефона', 'phone'),
    ('дата рождения', 'birthday'),
    ('почтовый индекс', 'zipcode'),
    ('имя пользователя', 'username'),
    ('название компании', 'company'),
    ('номер карты', 'credit_card'),
    ('владелец карты', 'account_name'),
    ('код безопасности', 'credit_card_cvv'),
    ('срок действия', 'credit_card_expiry'),
    ('номер счета', 'account_number'),
    ('веб-сайт', 'url'),
    ('домашняя страница', 'url'),
    ('населенный пункт', 'city'),
    ('пароль', 'password'),
    ('фамилия', 'lastname'),
    ('имя', 'firstname'),
    ('отчество', 'firstname'),
    ('телефон', 'phone'),
    ('мобильный', 'phone'),
    ('адрес', 'address'),
    ('улица', 'address'),
    ('город', 'city'),
    ('область', 'state'),
    ('регион', 'state'),
    ('страна', 'country'),
    ('пол', 'sex'),
    ('возраст', 'age'),
    ('сайт', 'url'),
    ('профессия', 'job_title'),
    ('должность', 'job_title'),
    ('компания', 'company'),
    ('организация', 'company'),
    ('отдел', 'department'),
    ('сообщение', 'description'),
    ('комментарий', 'description'),
    ('поиск', 'search'),
    ('цена', 'price'),
    ('количество', 'number'),
    ('описание', 'description'),
    ('email', 'email'),
    ('факс', 'phone'),
    ('дом', 'building'),
    ('кв', 'room_number'),
]

RUSSIAN = KeywordDictionary(language='ru', entries=RUSSIAN_KEYWORDS, detector=has_cyrillic)
