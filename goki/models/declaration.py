"""
常量声明数据模型

一次运行构造一个 DeclarationEntry，由 DeclarationMerger 消费一次，之后不再修改。
"""

from pydantic import BaseModel, ConfigDict, field_validator

from goki.utils.go_syntax import is_identifier, quote


class DeclarationEntry(BaseModel):
    """待写入的 (name, value) 常量声明"""
    model_config = ConfigDict(frozen=True)

    name: str
    value: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """常量名必须是合法的 Go 标识符"""
        if not is_identifier(v):
            raise ValueError(f"{quote(v)} is not a valid Go identifier")
        return v

    def render(self) -> str:
        """渲染为声明行: const <Name> = "<Value>"\\n"""
        return f"const {self.name} = {quote(self.value)}\n"
