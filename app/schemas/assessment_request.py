"""
Inbound assessment payloads.

The client submits one questionnaire at a time, tagged by `assessment_type`.
Each calculator has its own input record; the tag selects which one is
validated and which scoring function runs. Bounds mirror the questionnaire
forms so nothing outside the calculators' calibrated range gets through.
"""
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, RootModel


# ── Enums shared by the questionnaires ──

class Gender(str, Enum):
    FEMALE = "female"
    MALE = "male"


class AssessmentType(str, Enum):
    BRCA = "BRCA"
    QRISK3 = "QRISK3"
    BCSC = "BCSC"
    FRAMINGHAM_ALZHEIMER = "framingham_alzheimer"
    CANCER = "cancer"
    CRC_PRO = "crc_pro"
    DEMPORT = "demport"


class SmokingStatus(str, Enum):
    NON_SMOKER = "non_smoker"
    EX_SMOKER = "ex_smoker"
    LIGHT_SMOKER = "light_smoker"
    MODERATE_SMOKER = "moderate_smoker"
    HEAVY_SMOKER = "heavy_smoker"


class Ethnicity(str, Enum):
    """QRISK3 ethnic groups."""
    WHITE = "white"
    INDIAN = "indian"
    PAKISTANI = "pakistani"
    BANGLADESHI = "bangladeshi"
    OTHER_ASIAN = "other_asian"
    BLACK_CARIBBEAN = "black_caribbean"
    BLACK_AFRICAN = "black_african"
    CHINESE = "chinese"
    OTHER = "other"


class RaceEthnicity(str, Enum):
    """BCSC race/ethnicity categories."""
    WHITE = "white"
    AFRICAN_AMERICAN = "african_american"
    HISPANIC = "hispanic"
    ASIAN = "asian"
    NATIVE_AMERICAN = "native_american"
    OTHER = "other"


class BreastDensity(str, Enum):
    """BI-RADS breast density."""
    ALMOST_ENTIRELY_FATTY = "almost_entirely_fatty"
    SCATTERED_FIBROGLANDULAR = "scattered_fibroglandular"
    HETEROGENEOUSLY_DENSE = "heterogeneously_dense"
    EXTREMELY_DENSE = "extremely_dense"


class Apoe4Status(str, Enum):
    UNKNOWN = "unknown"
    NEGATIVE = "negative"
    HETEROZYGOUS = "heterozygous"
    HOMOZYGOUS = "homozygous"


class LifetimeSmoking(str, Enum):
    NEVER = "never"
    FORMER = "former"
    CURRENT = "current"


class ActivityLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class AlcoholConsumption(str, Enum):
    NONE = "none"
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"


class IntakeLevel(str, Enum):
    """Low / moderate / high answers (diet, sun, engagement, stress)."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class SleepQuality(str, Enum):
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"


class SkinType(str, Enum):
    VERY_FAIR = "very_fair"
    FAIR = "fair"
    MEDIUM = "medium"
    OLIVE = "olive"
    BROWN = "brown"
    BLACK = "black"


class ScreeningFrequency(str, Enum):
    REGULAR = "regular"
    IRREGULAR = "irregular"
    NEVER = "never"


class RelativeDegree(str, Enum):
    FIRST = "first"
    SECOND = "second"
    BOTH = "both"


class CancerSite(str, Enum):
    BREAST = "breast"
    LUNG = "lung"
    COLORECTAL = "colorectal"
    PROSTATE = "prostate"
    OVARIAN = "ovarian"
    MELANOMA = "melanoma"
    PANCREATIC = "pancreatic"
    STOMACH = "stomach"
    KIDNEY = "kidney"
    BLADDER = "bladder"
    CERVICAL = "cervical"
    ENDOMETRIAL = "endometrial"


# ── Calculator inputs ──

class BRCAInput(BaseModel):
    """Hereditary breast/ovarian cancer questionnaire."""
    brca1_mutation: bool = False
    brca2_mutation: bool = False
    family_history_breast: bool = False
    family_history_ovarian: bool = False
    ashkenazi_ancestry: bool = False
    age: int = Field(30, ge=18, le=100)
    gender: Gender = Gender.FEMALE


class QRISK3Input(BaseModel):
    """10-year cardiovascular questionnaire."""
    age: int = Field(45, ge=25, le=84)
    gender: Gender = Gender.FEMALE
    smoking_status: SmokingStatus = SmokingStatus.NON_SMOKER
    diabetes: bool = False
    angina_or_heart_attack: bool = False
    chronic_kidney_disease: bool = False
    atrial_fibrillation: bool = False
    rheumatoid_arthritis: bool = False
    cholesterol_hdl_ratio: float = Field(4.0, ge=1, le=12)
    systolic_blood_pressure: float = Field(120.0, ge=70, le=210)
    blood_pressure_treatment: bool = False
    bmi: float = Field(25.0, ge=15, le=50)
    family_history_cvd: bool = False
    ethnicity: Ethnicity = Ethnicity.WHITE


class BCSCInput(BaseModel):
    """Breast Cancer Surveillance Consortium questionnaire."""
    age: int = Field(45, ge=35, le=100)
    race_ethnicity: RaceEthnicity = RaceEthnicity.WHITE
    family_history_first_degree: bool = False
    previous_breast_biopsy: bool = False
    biopsy_with_atypia: bool = False
    breast_density: BreastDensity = BreastDensity.SCATTERED_FIBROGLANDULAR
    current_hormone_therapy: bool = False
    nulliparous: bool = False
    age_at_first_birth: Optional[int] = Field(None, ge=10, le=60)


class FraminghamAlzheimerInput(BaseModel):
    """Dementia risk questionnaire (Framingham-style point score)."""
    age: int = Field(65, ge=18, le=110)
    gender: Gender = Gender.FEMALE
    education_years: int = Field(12, ge=0, le=30)
    apoe4_status: Apoe4Status = Apoe4Status.UNKNOWN
    family_history_dementia: bool = False
    cardiovascular_disease: bool = False
    diabetes: bool = False
    hypertension: bool = False
    smoking_status: LifetimeSmoking = LifetimeSmoking.NEVER
    physical_activity: ActivityLevel = ActivityLevel.MODERATE
    bmi: Optional[float] = Field(None, ge=10, le=70)
    depression_history: bool = False
    head_injury_history: bool = False
    alcohol_consumption: AlcoholConsumption = AlcoholConsumption.LIGHT
    social_isolation: bool = False
    cognitive_complaints: bool = False


class CancerInput(BaseModel):
    """General cancer screening questionnaire (several cancer sites at once)."""
    age: int = Field(45, ge=18, le=100)
    gender: Gender = Gender.FEMALE
    height: float = Field(165.0, ge=100, le=250, description="cm")
    weight: float = Field(65.0, ge=30, le=300, description="kg")
    smoking_status: LifetimeSmoking = LifetimeSmoking.NEVER
    cigarettes_per_day: int = Field(0, ge=0, le=100)
    smoking_years: int = Field(0, ge=0, le=80)
    family_cancer_history: bool = False
    family_cancer_types: list[CancerSite] = []
    family_cancer_degree: Optional[RelativeDegree] = None
    age_at_menarche: Optional[int] = Field(None, ge=8, le=20)
    age_at_menopause: Optional[int] = Field(None, ge=30, le=65)
    pregnancies_count: Optional[int] = Field(None, ge=0, le=20)
    age_at_first_birth: Optional[int] = Field(None, ge=10, le=60)
    hormone_replacement_therapy: bool = False
    alcohol_consumption: AlcoholConsumption = AlcoholConsumption.NONE
    physical_activity: ActivityLevel = ActivityLevel.MODERATE
    red_meat_consumption: IntakeLevel = IntakeLevel.MODERATE
    processed_meat_consumption: IntakeLevel = IntakeLevel.LOW
    fruit_vegetable_intake: IntakeLevel = IntakeLevel.MODERATE
    sun_exposure: IntakeLevel = IntakeLevel.MODERATE
    skin_type: SkinType = SkinType.MEDIUM
    occupational_exposure: bool = False
    inflammatory_bowel_disease: bool = False
    mammography_frequency: ScreeningFrequency = ScreeningFrequency.NEVER
    colonoscopy_frequency: ScreeningFrequency = ScreeningFrequency.NEVER
    pap_smear_frequency: ScreeningFrequency = ScreeningFrequency.REGULAR

    @property
    def bmi(self) -> float:
        return self.weight / (self.height / 100) ** 2


class CRCProInput(BaseModel):
    """Colorectal cancer questionnaire (CRC-PRO point score)."""
    age: int = Field(50, ge=18, le=100)
    gender: Gender = Gender.FEMALE
    family_history_crc: bool = False
    family_history_polyps: bool = False
    family_history_ibd: bool = False
    number_affected_relatives: int = Field(0, ge=0, le=20)
    personal_history_polyps: bool = False
    personal_history_ibd: bool = False
    diabetes_type2: bool = False
    smoking_status: LifetimeSmoking = LifetimeSmoking.NEVER
    alcohol_consumption: AlcoholConsumption = AlcoholConsumption.NONE
    physical_activity: ActivityLevel = ActivityLevel.MODERATE
    red_meat_consumption: IntakeLevel = IntakeLevel.MODERATE
    processed_meat_consumption: IntakeLevel = IntakeLevel.MODERATE
    fiber_intake: IntakeLevel = IntakeLevel.MODERATE
    vegetable_intake: IntakeLevel = IntakeLevel.MODERATE
    calcium_supplements: bool = False
    nsaid_use: bool = False
    multivitamin_use: bool = False
    height_cm: Optional[float] = Field(None, ge=100, le=250)
    weight_kg: Optional[float] = Field(None, ge=30, le=300)
    previous_colonoscopy: bool = False
    last_colonoscopy_date: Optional[date] = None


class DemPortInput(BaseModel):
    """Dementia population risk tool questionnaire."""
    age: int = Field(65, ge=18, le=110)
    gender: Gender = Gender.FEMALE
    apoe4_status: Apoe4Status = Apoe4Status.UNKNOWN
    education_years: int = Field(12, ge=0, le=30)
    systolic_bp: float = Field(120.0, ge=70, le=250)
    total_cholesterol: float = Field(200.0, ge=80, le=500, description="mg/dL")
    hdl_cholesterol: float = Field(50.0, ge=10, le=150, description="mg/dL")
    diabetes: bool = False
    smoking_status: LifetimeSmoking = LifetimeSmoking.NEVER
    physical_activity: ActivityLevel = ActivityLevel.MODERATE
    bmi: Optional[float] = Field(None, ge=10, le=70)
    alcohol_consumption: AlcoholConsumption = AlcoholConsumption.NONE
    depression_history: bool = False
    head_injury_history: bool = False
    stroke_history: bool = False
    heart_disease: bool = False
    cognitive_activities: IntakeLevel = IntakeLevel.MODERATE
    social_engagement: IntakeLevel = IntakeLevel.MODERATE
    sleep_quality: SleepQuality = SleepQuality.FAIR
    stress_levels: IntakeLevel = IntakeLevel.MODERATE
    family_dementia_history: bool = False
    family_cardiovascular_history: bool = False


# ── Tagged request envelopes ──

class BRCARequest(BaseModel):
    assessment_type: Literal["BRCA"] = "BRCA"
    assessment_data: BRCAInput


class QRISK3Request(BaseModel):
    assessment_type: Literal["QRISK3"] = "QRISK3"
    assessment_data: QRISK3Input


class BCSCRequest(BaseModel):
    assessment_type: Literal["BCSC"] = "BCSC"
    assessment_data: BCSCInput


class FraminghamAlzheimerRequest(BaseModel):
    assessment_type: Literal["framingham_alzheimer"] = "framingham_alzheimer"
    assessment_data: FraminghamAlzheimerInput


class CancerRequest(BaseModel):
    assessment_type: Literal["cancer"] = "cancer"
    assessment_data: CancerInput


class CRCProRequest(BaseModel):
    assessment_type: Literal["crc_pro"] = "crc_pro"
    assessment_data: CRCProInput


class DemPortRequest(BaseModel):
    assessment_type: Literal["demport"] = "demport"
    assessment_data: DemPortInput


CalculatorRequest = Annotated[
    Union[
        BRCARequest,
        QRISK3Request,
        BCSCRequest,
        FraminghamAlzheimerRequest,
        CancerRequest,
        CRCProRequest,
        DemPortRequest,
    ],
    Field(discriminator="assessment_type"),
]


class AssessmentRequest(RootModel[CalculatorRequest]):
    """
    POST /v1/assessments/calculate

    {"assessment_type": "BRCA", "assessment_data": {...}}
    """
