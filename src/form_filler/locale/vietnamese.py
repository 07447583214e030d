"""ベトナム語キーワード辞書

ラテン文字ベースのため、固有のダイアクリティカルマークを含む入力のみ対象。
"""

from ..analyzer.text_utils import has_vietnamese
from .keyword_dictionary import KeywordDictionary

VIETNAMESE_KEYWORDS = [
    ('nhập lại mật khẩu', 'password'),
    ('xác nhận mật khẩu', 'password'),
    ('họ và tên đệm', 'lastname'),
    ('số điện thoại', 'phone'),
    ('tên đăng nhập', 'username'),
    ('tỉnh thành phố', 'city'),
    ('quận huyện', 'city'),
    ('phường xã', 'ward'),
    ('ngày sinh', 'birthday'),
    ('thành phố', 'city'),
    ('mật khẩu', 'password'),
    ('địa chỉ email', 'email'),
    ('ghi chú', 'text'),
    ('tiêu đề', 'text'),
    ('nội dung', 'text'),
    ('tìm kiếm', 'search'),
    ('số thẻ', 'credit_card'),
    ('mã bảo mật', 'credit_card_cvv'),
    ('ngày hết hạn', 'credit_card_expiry'),
    ('số tài khoản', 'account_number'),
    ('chủ tài khoản', 'account_name'),
    ('trang web', 'url'),
    ('mã bưu điện', 'zipcode'),
    ('mã bưu chính', 'zipcode'),
    ('họ và tên', 'name'),
    ('điện thoại', 'phone'),
    ('tài khoản', 'username'),
    ('giới tính', 'sex'),
    ('quốc gia', 'country'),
    ('bưu điện', 'zipcode'),
    ('công ty', 'company'),
    ('chức vụ', 'job_title'),
    ('website', 'url'),
    ('di động', 'phone'),
    ('cố định', 'phone'),
    ('liên hệ', 'phone'),
    ('địa chỉ', 'address'),
    ('mô tả', 'description'),
    ('giá', 'price'),
    ('số lượng', 'number'),
    ('họ tên', 'name'),
    ('email', 'email'),
    ('thư', 'email'),
    ('tên', 'firstname'),
    ('họ', 'lastname'),
    ('tuổi', 'age'),
    ('fax', 'phone'),
]

VIETNAMESE = KeywordDictionary(
    language='vi',
    entries=VIETNAMESE_KEYWORDS,
    detector=has_vietnamese,
    ignore_case=True,
)
