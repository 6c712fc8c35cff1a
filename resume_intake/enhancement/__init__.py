from resume_intake.enhancement.base import BaseEnhancer, PassthroughEnhancer
from resume_intake.enhancement.enhancer import Enhancer
from resume_intake.enhancement.factory import EnhancerFactory

__all__ = ["BaseEnhancer", "Enhancer", "EnhancerFactory", "PassthroughEnhancer"]
