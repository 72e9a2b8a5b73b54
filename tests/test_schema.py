import unittest

from antennafreq import AntennaNetwork, Constraint, FrequencyAllocator


class TestAntennaNetwork(unittest.TestCase):
    def setUp(self):
        self.network = AntennaNetwork()
        for name in ["A", "B", "C"]:
            self.network.add_antenna(name)

    def testAddAntenna(self):
        self.assertFalse(self.network.add_antenna("A"))
        self.assertFalse(self.network.add_antenna(""))
        self.assertTrue(self.network.add_antenna("D"))
        self.assertEqual(self.network.antennas, ["A", "B", "C", "D"])

    def testAddConstraint(self):
        self.assertTrue(self.network.add_constraint("A", "B"))
        self.assertFalse(self.network.add_constraint("B", "A"))
        self.assertFalse(self.network.add_constraint("A", "A"))
        self.assertFalse(self.network.add_constraint("A", "Z"))
        self.assertEqual(self.network.constraints, [Constraint("A", "B")])

    def testRemoveAntennaCascades(self):
        self.network.add_constraint("A", "B")
        self.network.add_constraint("B", "C")
        self.network.add_constraint("C", "A")
        self.network.remove_antenna("B")

        self.assertEqual(self.network.antennas, ["A", "C"])
        self.assertEqual(self.network.constraints, [Constraint("C", "A")])

    def testRemoveConstraint(self):
        self.network.add_constraint("A", "B")
        self.network.add_constraint("B", "C")

        self.assertEqual(self.network.remove_constraint(0), Constraint("A", "B"))
        self.assertEqual(self.network.constraints, [Constraint("B", "C")])
        with self.assertRaises(IndexError):
            self.network.remove_constraint(5)

    def testSerialize(self):
        self.network.add_constraint("A", "C")
        data = self.network.serialize()

        self.assertEqual(
            data,
            {
                "antennas": ["A", "B", "C"],
                "constraints": [{"source": "A", "target": "C"}],
            },
        )
        self.assertEqual(AntennaNetwork.from_dict(data), self.network)

    def testFromDictSkipsInvalid(self):
        network = AntennaNetwork.from_dict(
            {"antennas": ["A", "A", "B"], "constraints": [["A", "B"], ["A", "Q"], ["B", "B"]]}
        )
        self.assertEqual(network.antennas, ["A", "B"])
        self.assertEqual(network.constraints, [Constraint("A", "B")])

    def testSerializedConstraintsFeedAllocator(self):
        self.network.add_constraint("A", "B")
        self.network.add_constraint("B", "C")
        data = self.network.serialize()

        allocator = FrequencyAllocator(data["antennas"], data["constraints"])
        self.assertEqual(allocator.constraints, [("A", "B"), ("B", "C")])
        self.assertEqual(dict(allocator.compute_coloring()), {"A": 2, "B": 1, "C": 2})

        lenient = FrequencyAllocator(data["antennas"], data["constraints"], strict=False)
        self.assertEqual(lenient.dropped_constraints, [])
        self.assertEqual(lenient.compute_coloring()["A"], 2)

    def testAddNonStringAntenna(self):
        self.assertTrue(self.network.add_antenna(0))
        self.assertFalse(self.network.add_antenna(0))
        self.assertFalse(self.network.add_antenna(None))
        self.assertTrue(self.network.add_constraint(0, "A"))
        self.assertEqual(self.network.antennas, ["A", "B", "C", 0])

    def testAllocator(self):
        self.network.add_constraint("A", "B")
        self.network.add_constraint("B", "C")
        allocator = self.network.allocator()

        self.assertIsInstance(allocator, FrequencyAllocator)
        self.assertEqual(dict(allocator.compute_coloring()), {"A": 2, "B": 1, "C": 2})

        # later edits do not leak into an existing allocator
        self.network.add_constraint("A", "C")
        self.assertEqual(allocator.degree("A"), 1)
        self.assertEqual(self.network.allocator().compute_coloring()["C"], 3)


if __name__ == "__main__":
    unittest.main()
