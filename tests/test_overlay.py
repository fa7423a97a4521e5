"""
Tests for the debug overlay
"""

import unittest

import numpy as np

from vision_target.core import TargetResolver, draw_target
from vision_target.models import CameraConfig, Target


class TestDrawTarget(unittest.TestCase):
    """Test drawing targets on frames."""

    def setUp(self):
        self.frame = np.zeros((240, 320, 3), dtype=np.uint8)
        self.resolver = TargetResolver(CameraConfig(frame_width=320, focal_length=160))

    def test_returns_copy(self):
        """Test the input frame is not modified."""
        candidates = [(100, 80, 10, 40), (130, 80, 10, 40)]
        target = self.resolver.resolve(candidates)

        out = draw_target(self.frame, target, candidates)

        self.assertEqual(out.shape, self.frame.shape)
        self.assertFalse(self.frame.any())
        self.assertTrue(out.any())

    def test_target_outline_drawn(self):
        """Test the union rectangle is drawn in green."""
        target = self.resolver.resolve([(100, 80, 10, 40), (130, 80, 10, 40)])

        out = draw_target(self.frame, target)

        # Middle of the top edge of the union rectangle
        self.assertEqual(tuple(out[80, 120]), (0, 255, 0))

    def test_no_target_draws_candidates_only(self):
        """Test frames without a target only show candidates."""
        out = draw_target(self.frame, Target.none(), [(10, 10, 20, 20)])

        self.assertEqual(tuple(out[10, 10]), (0, 0, 255))
        self.assertFalse(out[:, :, 1].any())

    def test_empty_frame_untouched(self):
        """Test nothing is drawn with no target and no candidates."""
        out = draw_target(self.frame, Target.none())
        self.assertFalse(out.any())


if __name__ == "__main__":
    unittest.main()
