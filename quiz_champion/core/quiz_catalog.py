"""Pre-built quizzes offered on the quest selection screen."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable

from quiz_champion.core.models import Question

logger = logging.getLogger(__name__)

QuestionBuilder = Callable[[], list[Question]]


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """A named quiz and the builder that produces its questions."""

    key: str
    title: str
    tagline: str
    builder: QuestionBuilder
    style: str = "cyan"


class QuizCatalog:
    """Ordered registry of quizzes; every build returns fresh Question objects."""

    def __init__(self, entries: list[CatalogEntry] | None = None) -> None:
        self._entries: dict[str, CatalogEntry] = {}
        self._question_counts: dict[str, int] = {}
        for entry in entries or []:
            self.register(entry)

    @classmethod
    def default(cls) -> "QuizCatalog":
        return cls(
            [
                CatalogEntry("beginner", "NOVICE QUEST", "Perfect for beginners", build_beginner_quiz, "green"),
                CatalogEntry("programming", "WARRIOR'S GAUNTLET", "Test your Java mastery", build_programming_quiz, "yellow"),
                CatalogEntry("advanced", "ELITE CHALLENGE", "Only for true champions", build_advanced_quiz, "red"),
                CatalogEntry("oop", "OOP MASTERY QUEST", "Master Object-Oriented Programming", build_oop_quiz, "magenta"),
            ]
        )

    def register(self, entry: CatalogEntry) -> None:
        if entry.key in self._entries:
            raise ValueError(f"A quiz named '{entry.key}' is already in the catalog.")
        self._entries[entry.key] = entry
        logger.info("Registered quiz '%s' (%s)", entry.key, entry.title)

    def entries(self) -> list[CatalogEntry]:
        return list(self._entries.values())

    def keys(self) -> list[str]:
        return list(self._entries)

    def get(self, key: str) -> CatalogEntry:
        try:
            return self._entries[key]
        except KeyError:
            raise KeyError(f"Unknown quiz '{key}'") from None

    def build(self, key: str) -> list[Question]:
        return self.get(key).builder()

    def question_count(self, key: str) -> int:
        """Number of questions in a quiz; the builder runs once per key."""
        if key not in self._question_counts:
            self._question_counts[key] = len(self.build(key))
        return self._question_counts[key]

    def __len__(self) -> int:
        return len(self._entries)


def build_beginner_quiz() -> list[Question]:
    return [
        Question.create(
            "What is the correct way to declare a variable?",
            ["int x;", "declare x;", "x = int;", "define x as int"],
            0,
            "The correct syntax is 'type variableName;' (e.g., int x;)",
        ),
        Question.create(
            "What does println stand for?",
            ["print line new", "print line number", "print line", "program line new"],
            2,
            "'println' prints a line and adds a newline character at the end.",
        ),
        Question.create(
            "Which keyword is used to create a loop that runs at least once?",
            ["while", "for", "do-while", "repeat"],
            2,
            "The do-while loop executes its body at least once before checking the condition.",
        ),
    ]


def build_programming_quiz() -> list[Question]:
    return [
        Question.create(
            "Which loop is best used when the number of iterations is known in advance?",
            ["while loop", "for loop", "do-while loop", "switch loop"],
            1,
            "The 'for' loop is ideal when you know exactly how many times you need to iterate.",
        ),
        Question.create(
            'What is the output of: if (5 > 3) System.out.println("Yes"); else System.out.println("No");',
            ["No", "Yes", "Error", "Null"],
            1,
            "Since 5 is greater than 3, the condition is true, so 'Yes' is printed.",
        ),
        Question.create(
            "Which collection maintains insertion order and allows duplicates?",
            ["HashSet", "ArrayList", "HashMap", "TreeSet"],
            1,
            "ArrayList is an ordered collection that allows duplicates. HashSet doesn't maintain order.",
        ),
        Question.create(
            "What's the best way to iterate through a List in Java?",
            ["Traditional for loop", "Enhanced for loop", "Iterator", "All of the above"],
            3,
            "All three methods work! Enhanced for loop is the most concise, Iterator is useful for removal.",
        ),
        Question.create(
            "Which condition is true if x = 10 and y = 20?",
            ["x > y && x == 10", "x > y || y > x", "!(x == 10)", "x < y && y < 30"],
            3,
            "10 < 20 is true AND 20 < 30 is true, so the entire condition is true.",
        ),
        Question.create(
            "How do you create an ArrayList of Strings in Java?",
            [
                "List<String> list = new ArrayList<>();",
                "ArrayList list = new ArrayList();",
                "String[] list = new ArrayList();",
                "Vector<String> list = new ArrayList<>();",
            ],
            0,
            "This is the proper generic syntax for creating a type-safe ArrayList.",
        ),
        Question.create(
            "What does the 'break' statement do in a loop?",
            [
                "Pauses the loop temporarily",
                "Exits the loop immediately",
                "Skips the current iteration",
                "Restarts the loop",
            ],
            1,
            "'break' terminates the loop and execution continues after it. 'continue' skips an iteration.",
        ),
        Question.create(
            "What is the result of: (true && false) || true?",
            ["true", "false", "undefined", "error"],
            0,
            "true && false = false, then false || true = true. OR returns true if at least one operand is true.",
        ),
    ]


def build_advanced_quiz() -> list[Question]:
    return [
        Question.create(
            "What is the time complexity of adding an element to an ArrayList?",
            ["O(1) amortized", "O(n)", "O(log n)", "O(n²)"],
            0,
            "Adding to the end of an ArrayList is O(1) amortized time complexity.",
        ),
        Question.create(
            "Which collection uses a hash table for O(1) lookups?",
            ["LinkedList", "HashMap", "TreeMap", "PriorityQueue"],
            1,
            "HashMap provides O(1) average-case time complexity for get and put operations.",
        ),
    ]


def build_oop_quiz() -> list[Question]:
    return [
        Question.create(
            "What is an object in Java?",
            [
                "A template for creating instances",
                "An instance of a class with state and behavior",
                "A method inside a class",
                "A type of variable",
            ],
            1,
            "An object is an instance of a class. It has attributes (state) and methods (behavior).",
        ),
        Question.create(
            "Which of the following is true about classes?",
            [
                "A class is an instance of an object",
                "A class is a logical entity that occupies memory",
                "A class is a blueprint/template for creating objects",
                "A class cannot have constructors",
            ],
            2,
            "A class is a blueprint or template that defines the structure and behavior for objects.",
        ),
        Question.create(
            "What is encapsulation in OOP?",
            [
                "Wrapping data and methods together and hiding internal details",
                "Creating multiple objects of a class",
                "Inheriting properties from parent class",
                "Creating abstract methods",
            ],
            0,
            "Encapsulation binds data and methods together while hiding implementation details "
            "behind access modifiers (private, public, protected).",
        ),
        Question.create(
            "What is inheritance in Java?",
            [
                "A mechanism to create new classes based on existing classes",
                "A way to store data in objects",
                "A method to create multiple objects",
                "A technique to hide data",
            ],
            0,
            "Inheritance lets a subclass take properties and methods from a superclass using 'extends'.",
        ),
        Question.create(
            "What does polymorphism mean in Java?",
            [
                "One object can have many forms or behaviors",
                "Creating multiple classes",
                "Hiding data from outside world",
                "Creating abstract classes only",
            ],
            0,
            "Polymorphism means 'many forms': method overriding gives runtime polymorphism and "
            "method overloading gives compile-time polymorphism.",
        ),
        Question.create(
            "Which access modifier allows access only within the same class?",
            ["public", "protected", "private", "default"],
            2,
            "The 'private' modifier restricts access to the same class. It is the most restrictive level.",
        ),
        Question.create(
            "What is the purpose of a constructor in Java?",
            [
                "To create methods for the class",
                "To initialize an object and set initial values to its variables",
                "To delete objects from memory",
                "To perform calculations",
            ],
            1,
            "A constructor is called when an object is created and initializes the object's state.",
        ),
        Question.create(
            "What does the 'this' keyword refer to?",
            [
                "The current class definition",
                "The current object instance",
                "The parent class",
                "The method name",
            ],
            1,
            "'this' refers to the current object instance and its variables and methods.",
        ),
        Question.create(
            "What is the 'super' keyword used for?",
            [
                "To refer to the current object",
                "To refer to the parent/superclass",
                "To create new objects",
                "To declare variables",
            ],
            1,
            "'super' refers to the superclass and is used to call parent methods and constructors.",
        ),
        Question.create(
            "What is method overriding?",
            [
                "Creating a method with the same name in the same class",
                "Creating a method with the same name and signature in a subclass",
                "Calling a method multiple times",
                "Deleting a parent class method",
            ],
            1,
            "Overriding is a subclass supplying its own implementation of a superclass method.",
        ),
        Question.create(
            "Which of the following is a requirement for method overloading?",
            [
                "Same method name and same parameters",
                "Different method name",
                "Same method name but different parameter types or number",
                "Same return type",
            ],
            2,
            "Overloading allows several methods with one name but different parameter lists.",
        ),
        Question.create(
            "What does the 'static' keyword signify?",
            [
                "The variable/method belongs to the instance",
                "The variable/method belongs to the class, not to instances",
                "The variable cannot be modified",
                "The method must be overridden",
            ],
            1,
            "Static members belong to the class itself and are shared by all instances.",
        ),
        Question.create(
            "What is abstraction in OOP?",
            [
                "Hiding complexity and showing only essential features",
                "Creating multiple objects",
                "Inheriting from multiple classes",
                "Making all methods public",
            ],
            0,
            "Abstraction hides implementation details behind abstract classes and interfaces.",
        ),
        Question.create(
            "Can an abstract class have concrete methods?",
            [
                "No, it cannot",
                "Yes, it can have both abstract and concrete methods",
                "Only if it extends another abstract class",
                "Only static methods can be concrete",
            ],
            1,
            "Abstract classes may mix abstract and concrete methods but cannot be instantiated.",
        ),
        Question.create(
            "What is an interface in Java?",
            [
                "A class with abstract methods only",
                "A contract that specifies what methods a class must implement",
                "A variable declaration",
                "A type of constructor",
            ],
            1,
            "An interface says what a class must do, not how. Classes adopt it with 'implements'.",
        ),
        Question.create(
            "What does the 'instanceof' operator do?",
            [
                "Creates a new instance of a class",
                "Checks if an object is an instance of a class or interface",
                "Compares two objects",
                "Deletes an object",
            ],
            1,
            "'instanceof' returns true when an object is an instance of the given class or interface.",
        ),
        Question.create(
            "What is loose coupling in OOP?",
            [
                "Classes are highly dependent on each other",
                "Classes have minimal dependencies and can work independently",
                "All classes inherit from one parent",
                "Methods call each other frequently",
            ],
            1,
            "Loosely coupled classes have minimal dependencies, which keeps code reusable.",
        ),
        Question.create(
            "Can constructors be overloaded in Java?",
            [
                "No, each class can have only one constructor",
                "Yes, constructors can be overloaded with different parameters",
                "Only if the class extends another class",
                "Only with static constructors",
            ],
            1,
            "A class may declare several constructors with different parameter lists.",
        ),
        Question.create(
            "What does the 'final' keyword do?",
            [
                "Makes a variable, method, or class unchangeable/non-overridable",
                "Makes a class abstract",
                "Initializes variables",
                "Ends a method execution",
            ],
            0,
            "A final variable cannot be reassigned, a final method cannot be overridden "
            "and a final class cannot be extended.",
        ),
        Question.create(
            "In Java, all classes implicitly extend which class?",
            ["Comparable", "Serializable", "Object", "Class"],
            2,
            "Object is the root of the class hierarchy and provides equals(), toString() and hashCode().",
        ),
    ]
