from .Errors import *
from .fs.Target import Target
from .fs.Payload import Payload
from .fs.Options import WriteOptions, WriteFileOptions, OpenOptions, ReadOptions
from .fs.Handle import OwnedHandle, BorrowedHandle
from .fs.common.FSOp import FSOp
from .fs.fsop.file.Append import Append
from .fs.fsop.file.Write import Write
from .fs.fsop.file.Open import Open
from .fs.fsop.file.Close import Close
from .fs.fsop.file.Read import Read
from .AppendWriter import *
