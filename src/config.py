from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Default loan scenario (the batch report runs exactly this)
    default_loan_amount: float = 40000.0
    default_term_months: int = 60

    # APR sweep, in percentage points
    apr_min: float = 0.0
    apr_max: float = 6.0
    apr_step: float = 0.5

    # Named two-point comparison shown in the summary
    compare_from_apr: float = 1.5
    compare_to_apr: float = 2.0

    # Input ranges enforced by the API and dashboard
    min_loan_amount: float = 1000.0
    max_loan_amount: float = 1_000_000.0
    min_term_months: int = 12
    max_term_months: int = 120
    max_apr: float = 100.0

    # +/- band (currency units) around zero treated as "no change"
    difference_tolerance: float = 0.01

    # Reports
    report_path: str = "car_loan_analysis.pdf"

    # App
    api_url: str = "http://localhost:8000"
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
