"""集中维护 md-orphan 的默认常量，方便各模块引用与修改。"""

# 默认文档扩展名，wiki 链接缺省后缀时也使用它。
DEFAULT_DOC_EXTENSION = ".md"

# 默认配置文件名，位于当前工作目录时自动加载。
DEFAULT_CONFIG_FILE = ".md-orphan.yaml"

# 默认日志级别，仅输出警告及以上信息。
DEFAULT_LOG_LEVEL = "warning"

# 可复用读缓冲区的初始容量（字节）。
READ_BUFFER_CAPACITY = 256 * 1024

# 标准链接中本地路径的最短长度，例如 ``x.md``。
MIN_LOCAL_PATH_LEN = 4

# 视为非本地资源的链接前缀。
REMOTE_PREFIXES = ("http://", "https://", "mailto:")

# 排除模式中被视为通配符的字符。
GLOB_CHARS = "*?["

# 程序名，用于帮助文本与日志。
PROG_NAME = "md-orphan"
