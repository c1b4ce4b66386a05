"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

# Bảng dữ liệu (giữ nguyên tên nghiệp vụ)
TABLE_ADMINS = "QuanLy"
TABLE_EMPLOYEE_ACCOUNTS = "ThongTin"
TABLE_PERSONNEL = "DanhSachNhanVien"
TABLE_POSITIONS = "DanhMucChucVu"
TABLE_EDUCATION_LEVELS = "DanhMucTrinhDo"
TABLE_DEPARTMENTS = "DanhMucPhongBan"
TABLE_TITLES = "DanhMucChucDanh"
TABLE_ACADEMIC_YEARS = "DanhMucNamHoc"

CODE_DIGITS = 3

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

AVATAR_SERVICE_URL = "https://ui-avatars.com/api/"
AVATAR_BACKGROUND = "0D8ABC"
AVATAR_COLOR = "fff"
AVATAR_SIZE = 128
DRIVE_IMAGE_URL = "https://lh3.googleusercontent.com/d/{file_id}"

MSG_INVALID_ACCOUNT = "a. Tài khoản không hợp lệ"
MSG_WRONG_PASSWORD = "b. Mật khẩu không đúng"
MSG_ACCOUNT_EXPIRED = "c. Tài khoản hết hạn sử dụng"
MSG_LOGIN_FAILED = "Có lỗi xảy ra, vui lòng thử lại."
MSG_EMPTY_VALUE = "Giá trị không được để trống."
