"""
关键词自动机（Aho-Corasick）：
- 构建 goto 字典树与 fail 指针
- 单遍扫描文本，输出全部命中
"""
