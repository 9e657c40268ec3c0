import re

##############################################################################
# Keyword vocabulary (English / Chinese), matched on lower-cased text
##############################################################################

ROTATE_KEYWORDS = ("rotate", "旋转", "转")
REFLECT_KEYWORDS = ("reflect", "反射", "镜像")
SCALE_KEYWORDS = ("scale", "缩放", "放大", "缩小")
SHEAR_KEYWORDS = ("shear", "剪切", "错切")
SQUEEZE_KEYWORDS = ("squeeze", "挤压")

# a stand-alone x / y, so that the x in "axis" does not pick the x axis
X_AXIS_PATTERN = re.compile(r"(?<![a-z])x(?![a-z])|横轴")
Y_AXIS_PATTERN = re.compile(r"(?<![a-z])y(?![a-z])|纵轴")

INTEGER_PATTERN = re.compile(r"(\d+)")
NUMBER_PATTERN = re.compile(r"(\d+\.?\d*)")

##############################################################################
# Remote text-completion service
##############################################################################

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.3
DEFAULT_TIMEOUT = 30.0  # seconds

ENV_API_KEY = "OPENAI_API_KEY"
ENV_BASE_URL = "OPENAI_BASE_URL"
ENV_MODEL = "OPENAI_MODEL"

SYSTEM_PROMPT = (
    "You are a math engine. Convert user text into a 2x2 Python list "
    "representing the matrix. ONLY return the JSON list, no text. "
    "Example: [[0, -1], [1, 0]]"
)

# replies wrapped in a markdown code fence are unwrapped before decoding
CODE_FENCE_PATTERN = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)
