class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class InvalidArgumentException(DomainException, ValueError):
    """引数（主に日付）が不正な場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass
