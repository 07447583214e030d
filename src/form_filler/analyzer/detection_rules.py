"""
テキスト系フィールドの判定ルール表

並び順がそのまま優先順位になる（先に一致したルールが勝つ）。
例: 'email-address' が address に流れないよう email を address より前に置く。
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class DetectionRule:
    """正規化タイプ → キーワード群（excluded_types は優先される具体タイプ）"""
    type: str
    keywords: Tuple[str, ...]
    excluded_types: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # シグナルは小文字化済みのため、キーワードも小文字で保持
        object.__setattr__(self, 'keywords', tuple(k.lower() for k in self.keywords))


def _rule(type_: str, keywords: List[str], excluded: Optional[List[str]] = None) -> DetectionRule:
    return DetectionRule(type=type_, keywords=tuple(keywords), excluded_types=tuple(excluded or ()))


TEXT_INPUT_RULES: List[DetectionRule] = [
    _rule('email', [
        'email', 'emailaddress', 'email_address', 'mail', 'mailaddress', 'mail_address',
        'e-mail', 'e_mail', 'e-mailaddress', 'e_mail_address',
    ]),
    _rule('username', [
        'username', 'user_name', 'loginid', 'login_id', 'login', 'userID', 'user_id', 'userid',
        'user', 'userlogin', 'user_login', 'useraccount', 'user_account',
    ]),
    _rule('first_name', [
        'firstname', 'first_name', 'givenname', 'given_name', 'forename', 'fore_name',
    ]),
    _rule('last_name', [
        'lastname', 'last_name', 'surname', 'sur_name', 'familyname', 'family_name',
        'secondname', 'second_name',
    ]),
    _rule('name', [
        'name', 'full_name', 'fullname', 'yourname', 'your_name', 'contactname',
        'contact_name', 'uname', 'u_name',
    ], excluded=['first_name', 'last_name']),
    _rule('phone', [
        'phone', 'phonenumber', 'phone_number', 'tel', 'telephone', 'mobile', 'cell',
        'contactnumber', 'contact_number', 'fax', 'faxnumber', 'fax_number',
        'whatsappnumber', 'whatsapp_number', 'vibernumber', 'viber_number',
        'wechatnumber', 'wechat_number', 'linenumber', 'line_number', 'skypenumber',
        'skype_number', 'telegramnumber', 'telegram_number', 'signalnumber',
        'signal_number', 'callnumber', 'call_number',
    ]),
    _rule('country', [
        'country', 'countryname', 'country_name', 'nationality', 'nationalityname',
        'nationality_name',
    ]),
    _rule('city', [
        'city', 'town', 'village', 'locality', 'localityname', 'locality_name', 'district',
        'districtname', 'district_name', 'suburb', 'suburbname', 'suburb_name',
        'municipality', 'municipalityname', 'municipality_name', 'ward', 'wardname',
        'ward_name',
    ]),
    _rule('building', [
        'building', 'buildingname', 'building_name', 'apartment', 'apartmentname',
        'apartment_name', 'unit', 'unitname', 'unit_name', 'flat', 'flatname', 'flat_name',
        'suite', 'suitename', 'suite_name', 'room', 'roomname', 'room_name', 'floor',
        'floorname', 'floor_name', 'block', 'blockname', 'block_name', 'house', 'housename',
        'house_name', 'condo', 'condoname', 'condo_name', 'villa', 'villaname', 'villa_name',
        'residence', 'residencename', 'residence_name',
    ]),
    _rule('room_number', [
        'roomnumber', 'room_number', 'roomno', 'room_no', 'roomnumbername', 'room_number_name',
    ]),
    _rule('zip', [
        'postalcode', 'postal_code', 'zipcode', 'zip_code', 'postcode', 'post_code', 'zip',
        'zipname', 'zip_name', 'postal', 'area_code', 'areacode', 'pin', 'pincode', 'pin_code',
    ]),
    _rule('state', [
        'state', 'statename', 'state_name', 'province', 'provincename', 'province_name',
        'territory', 'territoryname', 'territory_name', 'region', 'regionname', 'region_name',
        'county', 'countyname', 'county_name', 'prefecture', 'prefecturename',
        'prefecture_name', 'department', 'departmentname', 'department_name', 'district',
        'districtname', 'district_name', 'zone', 'zonename', 'zone_name', 'area', 'areaname',
        'area_name', 'division', 'divisionname', 'division_name', 'subdivision',
        'subdivisionname',
    ]),
    _rule('birth_year', [
        'birthyear', 'birth_year', 'byear', 'b_year', 'yearofbirth', 'year_of_birth',
        'dobyear', 'dob_year',
    ]),
    _rule('year', ['year', 'yearnum', 'year_num']),
    _rule('birth_month', [
        'birthmonth', 'birth_month', 'bmonth', 'b_month', 'monthofbirth', 'month_of_birth',
        'dobmonth', 'dob_month',
    ]),
    _rule('month', ['month', 'monthnum', 'month_num']),
    _rule('birthdate', [
        'birthdate', 'birth_date', 'dob', 'dateofbirth', 'date_of_birth', 'birthday',
        'bdate', 'b_date', 'bday', 'born', 'born_date', 'borndate',
    ]),
    _rule('date', ['date', 'datepicker', 'date_picker']),
    _rule('birth_day', ['birth_day', 'dayofbirth', 'day_of_birth', 'dobday', 'dob_day']),
    _rule('day', ['day', 'daynum', 'day_num']),
    _rule('time', [
        'time', 'timepicker', 'time_picker', 'appointmenttime', 'appointment_time',
        'meetingtime', 'meeting_time',
    ]),
    _rule('url', [
        'url', 'website', 'web_site', 'webaddress', 'web_address', 'domain', 'homepage',
        'home_page', 'webpage', 'web_page', 'site', 'link',
    ]),
    _rule('po_box', [
        'pobox', 'po_box', 'postofficebox', 'post_office_box', 'postbox', 'post_box',
        'po_box_number', 'po_box_no', 'poboxnumber', 'pobox_no', 'postofficeboxnumber',
        'post_office_box_number',
    ]),
    _rule('color', [
        'color', 'colour', 'hex', 'hexcode', 'hex_color', 'rgb', 'rgba', 'hsl', 'hsla',
        'colorpicker', 'color_picker', 'colourpicker', 'colour_picker',
    ]),
    _rule('password', [
        'password', 'pass', 'passwd', 'pwd', 'passphrase', 'pass_phrase',
        'passwordconfirmation', 'password_confirmation', 'confirmpassword',
        'confirm_password', 'newpassword', 'new_password', 'currentpassword',
        'current_password',
    ]),
    _rule('company', [
        'company', 'organization', 'companyname', 'company_name', 'businessname',
        'business_name', 'corporationname', 'corporation_name',
    ]),
    _rule('address', [
        'address', 'address1', 'address_1', 'addressline', 'address_line', 'addressline1',
        'address_line1', 'address_line_1', 'street', 'streetaddress', 'street_address',
        'streetaddress1', 'street_address1', 'street_line', 'streetline1',
        'residentialaddress', 'residential_address', 'mailingaddress', 'mailing_address',
        'shippingaddress', 'shipping_address', 'homeaddress', 'home_address', 'workaddress',
        'work_address', 'officeaddress', 'office_address', 'deliveryaddress',
        'delivery_address', 'locationaddress', 'location_address', 'physicaladdress',
        'physical_address', 'billingaddress', 'billing_address', 'address2', 'address_2',
        'addressline2', 'address_line2', 'address_line_2', 'streetaddress2',
        'street_address2', 'streetline2', 'street_line2',
    ]),
    _rule('ip_address', ['ipaddress', 'ip_address', 'ipv4', 'ipv6', 'ip']),
    _rule('mac_address', ['macaddress', 'mac_address']),
    _rule('credit_card', [
        'creditcard', 'credit_card', 'cardnumber', 'card_number', 'cardno', 'card_no',
        'ccnumber', 'cc_number', 'ccno', 'cc_no', 'cc', 'debitcard', 'debit_card',
    ]),
    _rule('credit_card_cvv', [
        'cvv', 'cvv2', 'cardverificationvalue', 'card_verification_value', 'cvc', 'cvc2',
        'cardsecuritycode', 'card_security_code', 'securitycode', 'security_code',
        'cvvcode', 'cvv_code',
    ]),
    _rule('account_name', ['accountname', 'account_name', 'bankaccountname', 'bank_account_name']),
    _rule('account_number', [
        'accountnumber', 'account_number', 'bankaccountnumber', 'bank_account_number',
        'iban', 'iban_number', 'bankaccount', 'bank_account', 'bankaccountno',
        'bank_account_no',
    ]),
    _rule('sex', ['sex', 'gender', 'pers_sex', 'person_sex']),
    _rule('number', [
        'age', 'quantity', 'count', 'amount', 'total', 'subtotal', 'price', 'cost', 'fee',
        'charge', 'payment', 'number', 'num', 'qty', 'qnty',
    ]),
    _rule('emoji', ['emoji']),
    _rule('user_agent', ['useragent', 'user_agent']),
    _rule('currency', ['currency', 'currency_symbol']),
    _rule('currency_code', ['currencycode', 'currency_code', 'currency_iso']),
    _rule('currency_name', ['currencyname', 'currency_name']),
    _rule('price', ['price', 'cost', 'amount', 'total', 'fee', 'charge', 'subtotal']),
    _rule('latitude', ['latitude', 'lat']),
    _rule('longitude', ['longitude', 'long', 'lng']),
]


# 日本語の文字種ヒント（正規化前のテキストに対して照合）
JAPANESE_SCRIPT_RULES: List[DetectionRule] = [
    _rule('hiragana', [
        'hiragana', 'hiragana_name', 'ひらがな', 'ひらがな名前', 'ひらがな氏名', 'ひらがな姓',
        'ひらがな名', 'ひらがなせい', 'ひらがなめい', 'ひらがなお名前', 'ひらがなのお名前',
        'ひらがなでご記入', 'ひらがなで記入', 'ふりがな', 'furi',
    ]),
    _rule('katakana', [
        'katakana', 'katakana_name', 'カタカナ', 'カタカナ名前', 'カタカナ氏名', 'カタカナ姓',
        'カタカナ名', 'カタカナせい', 'カタカナめい', 'カタカナお名前', 'カタカナのお名前',
        'カタカナでご記入', 'カタカナで記入', 'フリガナ', 'かたかな', 'カナ', 'kana',
    ]),
    _rule('romaji', [
        'romaji', 'romaji_name', 'romanized', 'romanized_name', 'ローマ字', 'ローマ字名前',
        'ローマ字氏名', 'ローマ字姓', 'ローマ字名', 'ローマ字せい', 'ローマ字めい',
        'ローマ字お名前', 'ローマ字のお名前', 'ローマ字でご記入', 'ローマ字で記入', 'roman',
        'english', 'alphabet', 'アルファベット', 'えいご', 'えいじ', 'roma',
    ]),
]


# ネイティブ種別がそのまま正規化タイプになるもの（キーワード走査を行わない）
NATIVE_INPUT_TYPES: Tuple[str, ...] = (
    'email', 'password', 'tel', 'color', 'month', 'date', 'datetime-local', 'time', 'url', 'week',
)

NATIVE_TYPE_MAPPING: Dict[str, str] = {
    'tel': 'phone',
}

# キーワード走査の対象となるネイティブ種別
CHECKABLE_KINDS: Tuple[str, ...] = ('text', 'search', 'number', 'textarea', '')


def get_rule(type_: str) -> Optional[DetectionRule]:
    for rule in TEXT_INPUT_RULES:
        if rule.type == type_:
            return rule
    return None


def get_keywords_for_type(type_: str) -> Tuple[str, ...]:
    rule = get_rule(type_)
    return rule.keywords if rule else ()
