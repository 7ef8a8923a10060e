import unittest

from services.member_service.app.repositories.memory import MemoryMemberRepository
from services.member_service.app.models.member import Member

class TestMemoryMemberRepository(unittest.TestCase):
    def setUp(self):
        self.repository = MemoryMemberRepository()

    def tearDown(self):
        self.repository.clear_store()

    def test_save(self):
        member = Member(name="TestUser")

        saved = self.repository.save(member)

        self.assertIs(saved, member)
        self.assertEqual(member.id, 1)
        self.assertIs(self.repository.find_by_id(member.id), member)

    def test_save_assigns_increasing_ids(self):
        first = self.repository.save(Member(name="Test1"))
        second = self.repository.save(Member(name="Test2"))

        self.assertLess(first.id, second.id)

    def test_find_by_name(self):
        member1 = self.repository.save(Member(name="Test1"))
        member2 = self.repository.save(Member(name="Test2"))

        self.assertIs(self.repository.find_by_name("Test1"), member1)
        self.assertIs(self.repository.find_by_name("Test2"), member2)
        self.assertIsNone(self.repository.find_by_name("Test3"))

    def test_find_all(self):
        self.repository.save(Member(name="Test1"))
        self.repository.save(Member(name="Test2"))

        result = self.repository.find_all()

        self.assertEqual(len(result), 2)
        self.assertEqual([m.name for m in result], ["Test1", "Test2"])

    def test_accepts_duplicate_names(self):
        first = self.repository.save(Member(name="Same"))
        self.repository.save(Member(name="Same"))

        self.assertEqual(len(self.repository.find_all()), 2)
        self.assertIs(self.repository.find_by_name("Same"), first)

    def test_save_replaces_caller_supplied_id(self):
        first = self.repository.save(Member(id=1, name="Test1"))
        second = self.repository.save(Member(name="Test2"))

        self.assertEqual([first.id, second.id], [1, 2])
        self.assertEqual(len(self.repository.find_all()), 2)
        self.assertIs(self.repository.find_by_id(1), first)

    def test_save_never_overwrites_existing_member(self):
        stored = self.repository.save(Member(name="Test1"))

        other = self.repository.save(Member(id=stored.id, name="Test2"))

        self.assertNotEqual(other.id, stored.id)
        self.assertIs(self.repository.find_by_id(stored.id), stored)
        self.assertEqual([m.name for m in self.repository.find_all()], ["Test1", "Test2"])

    def test_clear_store_keeps_sequence(self):
        self.repository.save(Member(name="Test1"))
        self.repository.clear_store()

        member = self.repository.save(Member(name="Test2"))

        self.assertEqual(self.repository.find_all(), [member])
        self.assertEqual(member.id, 2)

if __name__ == '__main__':
    unittest.main()
