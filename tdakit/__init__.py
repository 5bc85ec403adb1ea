"""Classic abstract data types: stack, linked list, hash table, heap and binary search tree."""

__version__ = "0.1.0"
__all__ = ["stack", "linked_list", "hashtable", "heap", "bst"]