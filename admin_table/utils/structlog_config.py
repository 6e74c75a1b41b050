"""admin_table 的结构化日志配置与辅助函数."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, cast

import structlog
from flask import has_request_context, request

from admin_table.settings import APP_NAME, APP_VERSION, Settings

if TYPE_CHECKING:
    from structlog.typing import BindableLogger, EventDict, Processor

LogField = object
LOGGER_NAME = "admin_table"


class DebugFilter:
    """根据配置决定是否丢弃 DEBUG 日志的处理器.

    Attributes:
        enabled: 是否启用 DEBUG 日志.

    """

    def __init__(self, *, enabled: bool = False) -> None:
        self.enabled = enabled

    def set_enabled(self, *, enabled: bool) -> None:
        """设置是否启用 DEBUG 日志."""
        self.enabled = enabled

    def __call__(self, _logger: BindableLogger, method_name: str, event_dict: EventDict) -> EventDict:
        """处理日志事件,未启用时丢弃 DEBUG 日志.

        Raises:
            structlog.DropEvent: 当前为 DEBUG 日志且未启用.

        """
        if method_name == "debug" and not self.enabled:
            raise structlog.DropEvent
        return event_dict


class StructlogConfig:
    """structlog 配置核心类.

    负责配置处理器链与调试日志过滤.

    Attributes:
        debug_filter: 调试日志过滤器.
        configured: 是否已配置标志.
        app_name: 写入日志的应用名称.
        app_version: 写入日志的应用版本.

    Example:
        >>> config = StructlogConfig()
        >>> config.configure(Settings.load())
        >>> logger = get_logger('my_module')

    """

    def __init__(self) -> None:
        self.debug_filter = DebugFilter(enabled=False)
        self.configured = False
        self.app_name = APP_NAME
        self.app_version = APP_VERSION

    def configure(self, settings: Settings | None = None) -> None:
        """初始化 structlog 处理器(幂等).

        可以多次调用,处理器链只会配置一次; 传入 settings 时刷新调试开关、日志级别与全局字段.

        Args:
            settings: 运行时设置,可选.

        """
        if not self.configured:
            processors = [
                self.debug_filter,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.stdlib.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                self._add_request_context,
                self._add_global_context,
                self._get_console_renderer(),
            ]
            structlog.configure(
                processors=cast("list[Processor]", processors),
                context_class=dict,
                logger_factory=structlog.stdlib.LoggerFactory(),
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True,
            )
            self.configured = True

        if settings is not None:
            self.debug_filter.set_enabled(enabled=settings.enable_debug_log)
            # DEBUG 开关开启时 stdlib 日志级别也需放行 DEBUG
            level = logging.DEBUG if settings.enable_debug_log else settings.log_level
            logging.getLogger(LOGGER_NAME).setLevel(level)
            self.app_name = settings.app_name
            self.app_version = settings.app_version

    @staticmethod
    def _add_request_context(
        _logger: BindableLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        """在 Flask 请求上下文中附加请求路径与方法."""
        if has_request_context():
            event_dict["request_path"] = request.path
            event_dict["request_method"] = request.method
        return event_dict

    def _add_global_context(
        self,
        _logger: BindableLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        """附加应用名称与版本."""
        event_dict["app_name"] = self.app_name
        event_dict["app_version"] = self.app_version
        return event_dict

    @staticmethod
    def _get_console_renderer() -> Processor:
        """根据终端能力返回渲染器."""
        return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


structlog_config = StructlogConfig()


def get_logger(name: str) -> Any:
    """获取结构化日志记录器.

    Args:
        name: 日志记录器名称,通常使用模块名.

    Returns:
        绑定的 structlog 日志记录器实例.

    """
    structlog_config.configure()
    return structlog.get_logger(name)


def should_log_debug() -> bool:
    """检查是否应该记录调试日志."""
    return structlog_config.debug_filter.enabled


def log_error(
    message: str,
    module: str = "app",
    exception: Exception | None = None,
    **kwargs: LogField,
) -> None:
    """记录错误级别日志.

    Args:
        message: 日志消息.
        module: 模块名称,默认为 'app'.
        exception: 可选的异常对象,会记录堆栈信息.
        **kwargs: 额外的上下文信息.

    """
    logger = get_logger(LOGGER_NAME)
    if exception:
        logger.error(
            message,
            module=module,
            exception=str(exception),
            exception_type=type(exception).__name__,
            exc_info=exception,
            **kwargs,
        )
    else:
        logger.error(message, module=module, **kwargs)


def log_debug(message: str, module: str = "app", **kwargs: LogField) -> None:
    """记录调试级别日志.

    仅在启用调试日志时记录.
    """
    if not should_log_debug():
        return
    logger = get_logger(LOGGER_NAME)
    logger.debug(message, module=module, **kwargs)
