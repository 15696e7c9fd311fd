# Survey Shared Messages
# User-facing text (Vietnamese)

MESSAGES = {
    'appTitle': 'Khảo sát ý kiến phụ huynh',
    'parentView': 'Phụ huynh',
    'adminView': 'Quản trị',
    'formTitle': 'Phiếu khảo sát ý kiến phụ huynh',
    'formDescription': 'Ý kiến của quý phụ huynh giúp nhà trường nâng cao chất lượng chăm sóc và giáo dục trẻ.',
    'hotline': 'Đường dây nóng: 0900 000 000',
    'classLabel': 'Lớp của con',
    'classSelectPlaceholder': '-- Chọn lớp --',
    'alreadyReviewed': 'đã gửi',
    'satisfactionRatingTitle': 'Mức độ hài lòng',
    'otherCommentsTitle': 'Ý kiến khác',
    'commentPlaceholder': 'Xin chia sẻ thêm ý kiến của quý phụ huynh...',
    'satisfied': 'Hài lòng',
    'unsatisfied': 'Chưa hài lòng',
    'submitButton': 'Gửi đánh giá',
    'submitSuccess': 'Cảm ơn quý phụ huynh đã gửi đánh giá!',
    'verifyingIp': 'Đang kiểm tra kết nối...',
    'retryConnection': 'Thử lại kết nối',
    'loginTitle': 'Đăng nhập để xem đánh giá',
    'username': 'Tên đăng nhập',
    'password': 'Mật khẩu',
    'loginButton': 'Đăng nhập',
    'logoutButton': 'Đăng xuất',
    'toggleTheme': 'Đổi giao diện',
    'totalReviews': 'Tổng số đánh giá',
    'allClasses': 'Tất cả các lớp',
    'filterButton': 'Lọc',
    'exportExcelButton': 'Xuất Excel',
    'resetButton': 'Xóa tất cả đánh giá',
    'resetConfirmation': 'Bạn có chắc chắn muốn xóa TẤT CẢ đánh giá? Hành động này không thể hoàn tác.',
    'deleteReviewConfirmation': 'Bạn có chắc chắn muốn xóa đánh giá này?',
    'deleteIpLogConfirmation': 'Bạn có chắc chắn muốn xóa nhật ký này?',
    'deleteAdminConfirmation': 'Bạn có chắc chắn muốn xóa tài khoản này?',
    'deleteButton': 'Xóa',
    'noReviews': 'Chưa có đánh giá nào.',
    'chartsTitle': 'Thống kê mức độ hài lòng',
    'chartAllClasses': 'Tổng hợp tất cả các lớp',
    'classPrefix': 'Lớp',
    'manageAdminsTitle': 'Quản lý tài khoản quản trị',
    'addNewAdmin': 'Thêm quản trị viên',
    'newUsername': 'Tên đăng nhập mới',
    'newPassword': 'Mật khẩu mới',
    'addAdminButton': 'Thêm',
    'adminList': 'Danh sách quản trị viên',
    'noAdmins': 'Chưa có tài khoản admin nào.',
    'deleteAdminButton': 'Xóa',
    'ipLogTitle': 'Giám sát IP gửi trùng',
    'noBlockedLogs': 'Chưa có lượt gửi trùng nào bị chặn.',
    'ipLogAttempt': 'Đã thử gửi cho Lớp',
    'changePasswordButton': 'Đổi mật khẩu',
    'changePasswordModalTitle': 'Đổi mật khẩu',
    'newPasswordLabel': 'Mật khẩu mới',
    'confirmPasswordLabel': 'Xác nhận mật khẩu',
    'savePasswordButton': 'Lưu mật khẩu',
    'passwordsDoNotMatch': 'Mật khẩu xác nhận không khớp.',
    'passwordTooShort': 'Mật khẩu phải có ít nhất 6 ký tự.',
    'passwordChangedSuccess': 'Đổi mật khẩu thành công!',
    'reviewDeletedSuccess': 'Đã xóa đánh giá.',
    'reviewsResetSuccess': 'Đã xóa tất cả đánh giá.',
    'ipLogDeletedSuccess': 'Đã xóa nhật ký.',
    'exportSheetName': 'Đánh giá',
    'exportColumns': {
        'className': 'Lớp',
        'submissionDate': 'Thời gian',
        'ipAddress': 'Địa chỉ IP',
        'comment': 'Ý kiến khác',
    },
    'formErrors': {
        'classMissing': 'Vui lòng chọn lớp.',
        'ratingMissing': 'Vui lòng đánh giá tất cả các mục.',
        'comment': 'Vui lòng nhập ý kiến khác.',
        'ipLimitError': 'Quý phụ huynh đã gửi đánh giá cho lớp này rồi.',
        'apiError': 'Đã có lỗi xảy ra. Vui lòng thử lại sau.',
        'vpnOrProxyError': 'Vui lòng tắt VPN/proxy và sử dụng kết nối tại Việt Nam để gửi đánh giá.',
        'ipVerifyFailed': 'Không thể xác minh kết nối của bạn. Vui lòng thử lại sau.',
        'loginError': 'Tên đăng nhập hoặc mật khẩu không đúng.',
        'loginRequired': 'Vui lòng đăng nhập.',
        'forbidden': 'Bạn không có quyền thực hiện thao tác này.',
        'credentialsMissing': 'Tên đăng nhập và mật khẩu không được để trống.',
        'usernameExistsError': 'Tên đăng nhập đã tồn tại.',
        'userAddedSuccess': 'Đã thêm quản trị viên.',
        'userDeletedSuccess': 'Đã xóa quản trị viên.',
        'passwordUpdateError': 'Không thể đổi mật khẩu. Vui lòng thử lại.',
    },
}
