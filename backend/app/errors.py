"""业务异常与 HTTP 错误映射"""
from enum import Enum
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """业务异常基类，子类决定 HTTP 状态码和对外消息"""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)

    @property
    def headers(self) -> dict[str, str] | None:
        return None


class ValidationFailure(AppError):
    """输入缺失或格式错误"""
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid request"


class AuthFailureKind(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    EXPIRED = "expired"
    INVALID_SIGNATURE = "invalid_signature"
    MALFORMED = "malformed"


class AuthFailure(AppError):
    """
    令牌认证失败

    kind 只用于日志与测试，客户端始终看到同一条消息。
    """
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Unauthorized"

    def __init__(self, kind: AuthFailureKind = AuthFailureKind.UNAUTHENTICATED):
        self.kind = kind
        super().__init__()

    @property
    def headers(self) -> dict[str, str]:
        return {"WWW-Authenticate": "Bearer"}


class CredentialFailure(AppError):
    """登录失败：邮箱不存在与密码错误不做区分"""
    status_code = status.HTTP_403_FORBIDDEN
    detail = "Credentials incorrect"


class DuplicateEmailFailure(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "Credentials taken"


class NotFoundFailure(AppError):
    """记录不存在，或不属于当前用户"""
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Not found"


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # 请求体校验失败统一返回 400
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": ValidationFailure.detail,
            "errors": jsonable_encoder(
                [{"loc": e["loc"], "msg": e["msg"], "type": e["type"]} for e in exc.errors()]
            ),
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"未处理异常: {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """注册全局异常处理"""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
