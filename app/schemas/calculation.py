from pydantic import BaseModel, ConfigDict, Field, StrictInt


class CalculationRequest(BaseModel):
    a: StrictInt = Field(..., ge=0, description="First non-negative operand")
    b: StrictInt = Field(..., ge=0, description="Second non-negative operand")


class CalculationResponse(BaseModel):
    factorial_a: int = Field(..., alias="a_factorial", description="Factorial of a")
    factorial_b: int = Field(..., alias="b_factorial", description="Factorial of b")

    model_config = ConfigDict(populate_by_name=True)
