"""
MathJax 初始化脚本
"""

# 启动配置：关闭自动排版，移除 noerrors 以便错误内嵌到 SVG 输出中
INIT_SETTINGS = """
window.MathJax = {
    startup: { typeset: false },
    tex: { packages: { '[-]': ['noerrors'] } }
};
"""

# 等待 MathJax 启动完成
READY_EXPRESSION = "MathJax.startup.promise.then(() => true)"

# 转换函数，缺省时 em=16、scale=1.0、display=true
CONVERT_FUNCTIONS = """
function mathtexDefaults(options) {
    options = options || {};
    options.em == null && (options.em = 16);
    options.scale == null && (options.scale = 1.0);
    options.display == null && (options.display = true);
    return options;
}
function HtmlToSvgConvert(text, options) {
    MathJax.texReset();
    var node = MathJax.tex2svg(text, mathtexDefaults(options));
    return MathJax.startup.adaptor.outerHTML(node.children[0]);
}
function HtmlToMMLConvert(text, options) {
    MathJax.texReset();
    return MathJax.tex2mml(text, mathtexDefaults(options));
}
"""

SVG_FUNCTION = "HtmlToSvgConvert"
MML_FUNCTION = "HtmlToMMLConvert"


def build_call(function: str, formula: str, options: str) -> str:
    """构造调用表达式，formula 必须已清洗"""
    return f'{function}("{formula}",{options})'
